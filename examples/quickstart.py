"""cronpattern Quick Start Example."""

import time
from datetime import datetime

from cronpattern import (
    InvalidPatternError,
    PatternTrigger,
    Predictor,
    SchedulingPattern,
    validate,
)


def main():
    """Main function to demonstrate cronpattern usage."""
    print("=== cronpattern Quick Start ===\n")

    # 1. Compile a pattern: weekdays at 09:00, and noon on the last day of the month
    print("1. Compiling pattern...")
    pattern = SchedulingPattern("0 0 9 * * mon-fri|0 0 12 L * *")
    print(f"   ✓ {pattern!r}\n")

    # 2. Check instants
    print("2. Matching instants...")
    for moment in (datetime(2025, 6, 16, 9, 0), datetime(2025, 6, 30, 12, 0), datetime(2025, 6, 14, 9, 0)):
        print(f"   {moment:%a %Y-%m-%d %H:%M} -> {pattern.match(moment)}")
    print()

    # 3. Validate user input
    print("3. Validating patterns...")
    for text in ("0 0 0 ? * fri#3", "0 0 25 * * *", "*/10 * * * *"):
        print(f"   {text!r}: {validate(text)}")
    try:
        SchedulingPattern("0 0 0 1 jna *")
    except InvalidPatternError as e:
        print(f"   ✗ {e} [{e.kind.value}]")
    print()

    # 4. Upcoming fire times
    print("4. Next fire times in Asia/Seoul...")
    predictor = Predictor(pattern, datetime(2025, 6, 27, 10, 0), "Asia/Seoul")
    for _ in range(4):
        print(f"   → {predictor.next_matching_date().isoformat()}")
    print()

    # 5. Polling loop using the trigger strategy
    print("5. Polling every second for 3 seconds...")
    trigger = PatternTrigger()
    args = {"pattern": "*/2 * * * * *"}
    for _ in range(3):
        now = datetime.now().astimezone()
        if trigger.should_fire(args, "UTC", now):
            print(f"   [{now:%H:%M:%S}] fire")
        time.sleep(1)

    print("\n=== Done ===")


if __name__ == "__main__":
    main()
