# eulerkit

Solutions to Project Euler problems 1–45, plus three small command-line
tools: a menu-driven calculator and GCD and LCM finders.

Every solution is a plain function you can call from your own code. Most
take parameters whose defaults are the values the problem uses, so you can
also run them on other limits.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Using the library

```python
from eulerkit.problems_01_14 import sum_multiples, largest_prime_factor
from eulerkit.problems_16_25 import number_to_words, nth_permutation
from eulerkit.problems_26_39 import longest_reciprocal_cycle
from eulerkit.problems_40_45 import pentagonal, is_pentagonal
from eulerkit.arith import gcd, lcm

sum_multiples(10)             # 23
largest_prime_factor(13195)   # 29
number_to_words(342)          # "three hundred and fortytwo"
longest_reciprocal_cycle(10)  # 7
is_pentagonal(pentagonal(10)) # True
gcd(12, 18), lcm(4, 6)        # (6, 12)
```

The solutions are split across four modules by problem number:

| Module                      | Problems |
|-----------------------------|----------|
| `eulerkit.problems_01_14`   | 1–14     |
| `eulerkit.problems_16_25`   | 16–25    |
| `eulerkit.problems_26_39`   | 26–39    |
| `eulerkit.problems_40_45`   | 40–45    |

Problems 22 and 42 need word lists. `load_names` and `load_words` read a
file of double-quoted, comma-separated words. Pass the result to
`names_total_score` or `count_triangle_words`. `parse_quoted_words` does the
same for a string you already have in memory.

## Command line

Print the answers to one or more problems:

```
eulerkit PROBLEM [PROBLEM ...] [--data-file PATH]
```

Each answer is printed as `Problem N: VALUE`. `--data-file` gives the word
list for problems 22 and 42. Without it they read `names.txt` and
`words.txt` from the current directory. If you ask for a problem with no
solution, the command exits with status 2. If a data file cannot be read, it
exits with status 1. From Python, `eulerkit.cli.answer(problem, data_file)`
returns the same value.

Some answers take a few seconds to compute.

The interactive tools:

```
eulerkit-calc          # menu-driven calculator: + - x / mod and powers
eulerkit-gcd [A B]     # greatest common divisor of two integers
eulerkit-lcm [A B]     # least common multiple of two integers
```

`eulerkit-gcd` and `eulerkit-lcm` take the two numbers as arguments. Without
arguments they prompt for them on standard input. In the calculator, choose
an operation by number, enter two numbers separated by a blank, then answer
1 to continue or 0 to stop. Any menu choice outside 1–6 exits. A modulo by
zero ends the session with an error.

## What is not included

Problems 7, 13, 15 and 31 have no solution in this package. Asking the
`eulerkit` command for them is an error. The package does not include the
word lists for problems 22 and 42; you supply those files yourself.