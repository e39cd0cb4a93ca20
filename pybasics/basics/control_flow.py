"""Conditionals, loops, pattern matching, break and continue."""

from typing import List

ADULT_AGE = 18


def classify_age(age: int) -> str:
    if age >= ADULT_AGE:
        return "You are an adult"
    else:
        return "You are a minor"


def letter_grade(score: int) -> str:
    if score >= 90:
        return "A"
    elif score >= 80:
        return "B"
    return "C"


def describe_day(day: str) -> str:
    match day:
        case "Monday":
            return "Start of work week"
        case "Friday":
            return "TGIF!"
        case "Saturday" | "Sunday":
            return "Weekend!"
        case _:
            return "Regular work day"


def feedback(score: int) -> str:
    # Guards only, no subject to compare against
    match score:
        case s if s >= 90:
            return "Excellent!"
        case s if s >= 80:
            return "Good job!"
        case _:
            return "Keep practicing!"


def skip_and_stop(limit: int = 5) -> List[int]:
    seen = []
    for i in range(limit):
        if i == 2:
            continue
        if i == 4:
            break
        seen.append(i)
    return seen


def main():
    print("=== If-Else Examples ===")
    print(classify_age(18))
    print(f"Grade: {letter_grade(85)}")

    print("\n=== Loop Examples ===")
    print("Basic for loop:")
    for i in range(3):
        print(f"Count: {i}")

    print("\nWhile-style loop:")
    count = 0
    while count < 3:
        print(f"Count: {count}")
        count += 1

    print("\nRange-based loop:")
    for index, fruit in enumerate(["apple", "banana", "orange"]):
        print(f"Index: {index}, Fruit: {fruit}")

    print("\n=== Match Examples ===")
    print(describe_day("Monday"))
    print(feedback(85))

    print("\n=== Break and Continue Examples ===")
    for number in skip_and_stop():
        print(f"Current number: {number}")


if __name__ == "__main__":
    main()
