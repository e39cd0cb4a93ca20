"""
A tour of standard library modules: string methods, math and datetime.
"""

import math
from datetime import datetime, timedelta


def format_duration(duration: timedelta) -> str:
    hours, remainder = divmod(int(duration.total_seconds()), 3600)
    minutes, seconds = divmod(remainder, 60)
    return f"{hours}h{minutes}m{seconds}s"


def main():
    print("=== String Methods ===")
    text = "  Hello, Python Programming!  "
    print(f"Original: {text!r}")
    print(f"Trimmed: {text.strip()!r}")
    print(f"Upper: {text.upper()}")
    print(f"Lower: {text.lower()}")
    print(f"Contains 'Python': {'Python' in text}")
    print(f"Replace: {text.replace('Python', 'CPython', 1)}")

    print("\n=== math Module ===")
    print(f"Pi: {math.pi:.5f}")
    print(f"Square root of 16: {math.sqrt(16):.2f}")
    print(f"Power 2^3: {math.pow(2, 3):.2f}")
    print(f"Absolute of -42: {abs(-42)}")
    print(f"Max of 10 and 5: {max(10, 5)}")

    print("\n=== datetime Module ===")
    now = datetime.now()
    print(f"Current time: {now}")
    print(f"Year: {now.year}")
    print(f"Month: {now.strftime('%B')}")
    print(f"Day: {now.day}")
    print(f"Formatted time: {now.strftime('%Y-%m-%d %H:%M:%S')}")

    tomorrow = now + timedelta(days=1)
    print(f"Tomorrow: {tomorrow}")

    duration = timedelta(hours=2, minutes=30)
    print(f"Duration: {format_duration(duration)}")

    print("\n=== Custom Package Note ===")
    print("To create custom packages:")
    print("1. Create a directory for your package with an __init__.py")
    print("2. Put your modules (.py files) inside it")
    print("3. Describe the project in pyproject.toml and install it: 'pip install -e .'")
    print("4. Import your package: 'from mypackage import mymodule'")


if __name__ == "__main__":
    main()
