# numcalc

numcalc is a small, dependency-free library of classical numerical methods in
pure Python. It suits teaching, experiments and small problems where the
steps of each algorithm should be easy to read.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What it contains

| Module | Contents |
| --- | --- |
| `numcalc.matrix` | `Matrix` (dense, row-major), `ConvergenceError`, `cross` |
| `numcalc.vector` | `max_value`, `max_abs`, `min_value`, `min_abs`, `sort_ascending`, `sort_descending`, `merge_sort` |
| `numcalc.norms` | `vector_norm`, `norm_1`, `norm_inf` |
| `numcalc.linear` | `solve_tridiagonal`, `solve_gauss_pivot`, `jacobi_iterate`, `seidel_iterate`, `sor_iterate` |
| `numcalc.decompose` | `cholesky`, `lu_doolittle` |
| `numcalc.eigen` | `is_symmetric`, `eigen_classical_jacobi`, `eigen_jacobi_pass`, `eigen_power` |
| `numcalc.roots` | `muller`, `newton_iterate`, `newton_system` |
| `numcalc.optimize` | `golden_section`, `nelder_mead` |
| `numcalc.ode_single` | `euler`, `euler_predictor_corrector`, `heun`, `trapezoid` |
| `numcalc.ode_multistep` | `adams_bashforth_moulton`, `hamming`, `milne_simpson` |
| `numcalc.ode_boundary` | `solve_linear_bvp` |

Invalid input, such as mismatched shapes or a non-square matrix, raises
`ValueError`. An iterative method that does not reach its tolerance within its
iteration limit raises `numcalc.matrix.ConvergenceError`. The Jacobi and
Seidel solvers also raise it up front when the 1-norm or infinity-norm of the
iteration matrix is not below 1.

## Matrices and vectors

`Matrix` holds `rows`, `columns` and a flat row-major `data` list. Build one
with `Matrix.zeros`, `Matrix.identity`, `Matrix.from_rows` or
`Matrix.from_vector` (a column vector). Entries are read and written as
`m[i, j]`; `row`, `column`, `transpose`, `append_row` and `append_column`
return new lists or matrices. `+`, `-`, `@` and multiplication by a number
work as expected, and `str(m)` prints one bracketed row per line.

```python
from numcalc.matrix import Matrix

a = Matrix.from_rows([[4.0, -1.0, 0.0],
                      [-1.0, 4.0, -1.0],
                      [0.0, -1.0, 4.0]])
b = Matrix.from_vector([1.0, 4.0, -3.0])

print(a @ b)
print(a.transpose())
print(2.0 * a - a)
```

The functions in `numcalc.vector` return `(value, index)` for the first
extreme element; `max_abs` and `min_abs` keep the element's sign.

## Linear systems and decompositions

```python
from numcalc.linear import solve_tridiagonal, solve_gauss_pivot

x = solve_tridiagonal(a, b)      # column vector, about [0.5, 1.0, -0.5]
y = solve_gauss_pivot([[1.0, 4.0, -5.0],
                       [1.0, 3.0, -2.0],
                       [6.0, -1.0, 18.0]], [3.0, 2.0, 2.0])
```

`jacobi_iterate`, `seidel_iterate` and `sor_iterate` return the solution as a
list. `seidel_iterate` always starts its sweeps from zero and uses `x0` only as
the first reference point for the convergence test.

`cholesky(a)` returns `L` with `a = L @ L.transpose()`; `lu_doolittle(a)`
returns `(L, U)` with unit lower triangular `L`, without pivoting.

## Eigenvalues

```python
from numcalc.eigen import eigen_classical_jacobi

m = Matrix.from_rows([[2.0, -1.0, 0.0],
                      [-1.0, 2.0, -1.0],
                      [0.0, -1.0, 2.0]])
values, vectors = eigen_classical_jacobi(m, 1e-6, 1000)
```

`values` is nearly diagonal with the eigenvalues on its diagonal; column `i`
of `vectors` belongs to `values[i, i]`. `eigen_power(a, u0, tol, max_iter)`
returns the dominant eigenvalue and an eigenvector scaled so that its
largest-magnitude component is 1.

## Roots and minima

```python
import math
from numcalc.roots import newton_iterate
from numcalc.optimize import golden_section

root = newton_iterate(lambda x: x**3 - x**2 - 1.0,
                      lambda x: 3.0 * x**2 - 2.0 * x,
                      1.4, 1.5, 1.5, 1000, 1e-6)
xmin = golden_section(lambda x: x * x - math.sin(x), 0.0, 1.0, 1e-10, 1000)
```

`muller` starts from three distinct points. `newton_system(funcs, jacobian,
x0, tol, max_iter)` solves a nonlinear system, with `funcs` and `jacobian`
taking a list of floats. `nelder_mead(f, x0, tol, max_iter)` takes an
n x (n + 1) matrix whose columns are the starting vertices and returns
`(best_vertex, best_value)`.

## Differential equations

```python
from numcalc.ode_single import heun

table = heun(lambda x, y: (x - y) / 2.0, 0.0, 1.0, 1e-3, 3000)
```

The one-step solvers return an (n + 1) x 2 matrix of `(x, y)` rows. The exact
value for this equation is y(3.0) = 1.669390.

The multistep solvers in `numcalc.ode_multistep` take a 2 x 4 `start` matrix
of four x values and their y values and return a 2 x (n + 1) matrix whose rows
are x and y. `solve_linear_bvp(p, q, r, boundary, steps)` solves
`x'' = p(t) x' + q(t) x + r(t)` with fixed end values by finite differences.

## What it does not do

numcalc is a library only; it has no command-line tool. The multistep
solvers do not compute their own four starting values: supply them, for
example from the first rows of `heun` transposed. Everything works on Python
lists and the `Matrix` class; there is no NumPy interface and no sparse
storage.