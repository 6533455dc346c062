"""
Dependency injection with Reader: build the update once, run it per environment.

Run: python examples/dependency_injection.py
"""
from monadic import ConsoleLogger, PRODUCTION, TEST, ask
from monadic.demo import update_with


def main():
    # One description of the work, no environment bound yet
    rename = update_with("dummy_id", "Thor")

    rename.apply(TEST)
    rename.apply(PRODUCTION)

    # Swap collaborators by deriving a new environment
    verbose = TEST.with_path("path_to_staging").with_logger(ConsoleLogger(level="DEBUG"))
    rename.apply(verbose)

    # Readers compose before they ever see an environment
    describe = ask().map(lambda env: f"db at {env.path}")
    print(describe.apply(PRODUCTION))


if __name__ == "__main__":
    main()
