"""
fuzzyjson demonstration script.
"""

import fuzzyjson


def main():
    print("fuzzyjson - Fuzzy JSON to JSON Demo")
    print("=" * 40)

    examples = [
        # Basic unquoted keys
        ('{ test: "this is a test"}', "Unquoted keys"),
        # Single quotes
        ("{'name': 'John', 'age': 30}", "Single quotes"),
        # Trailing commas
        ('{"items": [1, 2, 3,], "active": yes,}', "Trailing commas and yes/no"),
        # Value in prose
        ("PI is 3.141", "Number inside a sentence"),
        ("PI is 3.", "No fractional digit, so an integer"),
        # Complex real-world example
        (
            """
        Here is the config:
        {
            server: {
                host: 'localhost',
                port: 8_080,   // digit separators
                ssl: False,
            },
            features: ['auth', "logging"],  # comment
            owner: None,
        }
        """,
            "Complex configuration",
        ),
        # Duplicate keys
        ('{"test": "value1", "test": "value2"}', "Duplicate keys are kept"),
        # Nothing to find
        ("Just some words", "No value anywhere"),
    ]

    for i, (text, description) in enumerate(examples, 1):
        print(f"\n{i}. {description}")
        print(f"Input:  {text.strip()}")

        result = fuzzyjson.fson(text)
        if result is None:
            print("Output: (no value found)")
        else:
            print(f"Output: {result}")


if __name__ == "__main__":
    main()
