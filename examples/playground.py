"""
Every demonstration in one go: functors, applicatives, monads, Reader, Try.

Run: python examples/playground.py
"""
from monadic.demo import main


if __name__ == "__main__":
    main()
