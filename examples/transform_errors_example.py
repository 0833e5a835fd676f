"""Minimal example for transform_errors on a form's nested error set."""

from error_transformer import ErrorTransformer, transform_errors


def main() -> None:
    """Flatten one form's errors two ways: fully, and with ``address`` kept nested."""
    errors = {
        "name": {"first": ["Required"], "last": ["Required", "Too long"]},
        "email": ["Invalid", "Invalid"],
        "address": {"city": ["Required"], "lines": [{"zip": ["Invalid"]}, {"zip": []}]},
    }

    print("flat:", transform_errors(errors))
    print("address nested:", transform_errors(errors, ["address"]))

    transformer = ErrorTransformer(["name", "address"], separator="; ")
    print(f"{transformer=}")
    print("reused:", transformer(errors))


if __name__ == "__main__":
    main()
