"""Variables, constants, built-in types and their zero values."""

from typing import Tuple

PI = 3.14159


def zero_values() -> Tuple[int, float, str, bool]:
    # Calling a built-in type with no arguments gives its zero value
    return int(), float(), str(), bool()


def type_name(value) -> str:
    return type(value).__name__


def main():
    name: str = "John"
    age: int = 25
    salary = 50000.0  # type inferred from the literal

    is_employed, company = True, "TechCorp"

    print("=== Basic Variables ===")
    print(f"Name: {name}")
    print(f"Age: {age}")
    print(f"Salary: {salary:.2f}")
    print(f"Employed: {is_employed}")
    print(f"Company: {company}")
    print(f"PI constant: {PI}")

    integer_num = 42
    float_num = 3.14
    text = "Hello, Python!"
    is_true = True

    print("\n=== Data Types ===")
    for label, value in (
        ("Integer", integer_num),
        ("Float", float_num),
        ("String", text),
        ("Boolean", is_true),
    ):
        print(f"{label}: {value} (Type: {type_name(value)})")

    default_int, default_float, default_string, default_bool = zero_values()
    print("\n=== Zero Values ===")
    print(f"Default Integer: {default_int}")
    print(f"Default Float: {default_float:f}")
    print(f"Default String: {default_string!r}")
    print(f"Default Boolean: {default_bool}")


if __name__ == "__main__":
    main()
