from __future__ import annotations

from dualrng.sources.resolve import describe_source


def main() -> None:
    info = describe_source("auto")
    print("Initializing dual-mode random number environment...")
    print(f"Native source: {info.name} ({info.reason})")
    print("Seed 0 selects native randomness; any other seed selects xoshiro128**.")


if __name__ == "__main__":
    main()
