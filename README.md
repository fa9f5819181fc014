# densematrix

A small, dependency-free dense matrix type for Python. It provides:

- element-wise addition and subtraction
- scaling by a number
- matrix multiplication
- transposition
- minors
- determinants
- the matrix of cofactors (algebraic complements)
- the inverse

All of it lives in the module `densematrix.matrix`.

## Installation

```
pip install .
```

## Usage

```python
from densematrix.matrix import Matrix, CalculationError

a = Matrix.from_rows([
    [2, 5, 7],
    [6, 3, 4],
    [5, -2, -3],
])

a.shape                 # (3, 3)
a.determinant()         # -1.0
a.inverse().to_list()   # [[1.0, -1.0, 1.0], [-38.0, 41.0, -34.0], [27.0, -29.0, 24.0]]
a.transpose()
a.complements()
a.minor(0, 1)           # a with row 0 and column 1 removed

b = Matrix(3, 3)        # a 3x3 matrix of zeros
b[0, 0] = 1.5           # set one element
b[0, 0]                 # 1.5
b[0]                    # (1.5, 0.0, 0.0), a row as a tuple
for row in b:           # iteration yields the rows as tuples
    print(row)

c = a + b               # also a.add(b)
d = a - b               # also a.subtract(b)
e = a * 2               # also 2 * a, or a.scale(2)
f = a @ b               # also a * b, or a.multiply(b)

# evenly spaced values, filled row by row
g = Matrix.linspace(2, 3, 1, 6)   # [[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]]
```

Every operation returns a new matrix; the operands are left unchanged.
Values are stored as floats. `to_list()` returns a copy of the values as a
list of row lists.

Two matrices compare equal (`==` or `equals`) when they have the same
shape and every pair of elements differs by less than `1e-7`. `equals`
returns `False` for anything that is not a `Matrix`. Matrices are not
hashable.

The determinant is computed by expansion along the first row, and the
inverse as the transposed cofactor matrix divided by the determinant.

## Errors

All errors derive from `MatrixError`:

- `InputError` (also a `ValueError`) is raised for invalid input: a matrix
  with fewer than one row or column, non-integer dimensions, rows of
  different lengths or non-numeric values in `from_rows`, an operand to
  `add`, `subtract` or `multiply` that is not a `Matrix`, a scale factor
  that is not a real number, or a `minor` position out of range or of a
  matrix with a single row or column.
- `CalculationError` (also an `ArithmeticError`) is raised when the
  operation cannot be carried out: mismatched shapes, a determinant or
  inverse of a non-square matrix, the inverse of a singular matrix,
  cofactors of a single-row or single-column matrix, a non-finite scale
  factor, or a result containing a non-finite value.

Using `+`, `-`, `*` or `@` with an unsupported operand type raises
Python's usual `TypeError`.

## Scope

This is a library only: it has no command-line tool, and it does not read
or write matrices from files.

## Running the tests

```
pip install .[test]
pytest
```