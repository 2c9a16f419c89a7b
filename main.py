from itertools import islice

from lazy import from_iterable
from sequences import (
    iterate, naturals, odds, fibonacci, xorshift,
    newton_sqrt, napiers_constant
)
from utils import setup_logging, load_settings


def show(values):
    for value in values:
        print(value)


def main():
    setup_logging(load_settings().log_level)

    natural = naturals()

    print("-- natural number --")
    show(natural.take(15))

    print("-- odd number --")
    show(odds().take(15))

    print("-- repeat --")
    show(iterate(0, lambda n: n + 1).take(3).cycle(4))

    print("-- combine --")
    up = iterate(0, lambda n: n + 1).take(3)
    down = iterate(3, lambda n: n - 1).take(3)
    show((up + down).cycle().take(20))

    print("-- fibonacci number --")
    show(fibonacci(0, 1).take(15))

    print("-- xorshift --")
    show(xorshift().take(30).map(lambda n: n % 10))

    print("-- map --")
    show(natural.take(10).map(lambda n: n * n))

    print("-- filter --")
    show(natural.take(10).filter(lambda n: n % 2 == 0))

    print("-- reduce --")
    print(natural.take(10).reduce(0, lambda acc, n: acc + n))

    print("-- pair --")
    show(from_iterable("ab").pair(from_iterable([1, 2, 3])))

    print("-- newton sqrt --")
    show(newton_sqrt(2.0, 2.0).take(6))

    print("-- Napier's constant --")
    # bounded by islice instead of take()
    show(islice(napiers_constant(1.0), 50))


if __name__ == "__main__":
    main()
