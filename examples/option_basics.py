"""
Option basics: construction, combinators, pattern matching and tracing.

Run: python examples/option_basics.py
"""
from optionpy import ConsoleLogger, Matcher, NONE, option, some


def find_user(users, name):
    return option(users.get(name))


def main():
    users = {
        "ada": {"address": some({"city": "London"})},
        "bob": {"address": NONE},
    }
    logger = ConsoleLogger(name="example", level="DEBUG")

    for name in ("ada", "bob", "eve"):
        city = find_user(users, name).trace(f"user {name}", logger).for_comprehension(
            lambda user: user["address"],
            lambda address: address["city"],
        )
        print(name, "=>", city.get_or_else_value("unknown"))

    describe = Matcher(some=lambda n: f"got {n}", none=lambda: "nothing")
    print(some(3).filter(lambda n: n > 2).match(describe))   # got 3
    print(some(1).filter(lambda n: n > 2).match(describe))   # nothing
    print(some(2).fold(lambda: -1)(lambda x: x * 3))         # 6


if __name__ == "__main__":
    main()
