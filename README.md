# ordenaciones

Sorting algorithms and binary trees that show their work. The sorts can print
the state of the sequence as they go, and the trees print themselves level by
level, which makes the package useful for studying how each method moves the
data around.

## What is inside

- `ordenaciones.nif` – `Nif`, an identity number used as a sort key, with
  `parse_nif` (which requires an eight-digit number) and `random_nif`.
- `ordenaciones.sequence` – `StaticSequence`, a fixed-size sequence that can be
  filled at random, from `<name>.txt` or interactively.
- `ordenaciones.sorting` – selection, quick, heap, shell and radix sort as
  `SortMethod` subclasses; `make_sort_method` picks one by name.
- `ordenaciones.classic_sorts` – insertion, shake, quick, heap and shell sort
  that announce themselves and can print step traces; `sort_by_code` picks one
  by numeric code.
- `ordenaciones.exercises` – combined exercises: sort two halves (or odd and
  even positions) with different methods and merge the results.
- `ordenaciones.trees` – `SearchTree`, `BalancedTree` and `AvlTree`, all
  `BinaryTree`s with `inorder`, `levels` and `format_levels`. `AvlTree` counts
  its rotations in `rotation_counts`.

## Installing

```
pip install .
```

## Using it as a library

```python
from ordenaciones.classic_sorts import heap_sort
from ordenaciones.sorting import make_sort_method
from ordenaciones.trees import AvlTree

data = [212, 237, 342, 132, 368, 347, 174, 672, 230, 154]
heap_sort(data, trace=True)   # prints ORIGINAL, selected steps and SORTED
print(data)

values = [5, 3, 9, 1]
make_sort_method("quick", values, trace=False).sort()
print(values)

tree = AvlTree()              # reports every rotation and its counters
for value in (30, 20, 10, 25):
    tree.insert(value)
print(25 in tree)
print(tree.format_levels())
```

## Command-line tools

Sort a sequence of NIFs by method name (`selection`, `quick`, `heap`, `shell`,
`radix`), filling it at random, from `<name>.txt` or by hand. The trace is on
unless `-trace n` is given:

```
ordenaciones-sort -size 10 -ord quick -init random -trace y
ordenaciones-sort -size 5 -ord radix -init file datos -trace n
```

Sort by numeric method code (0 insertion, 1 shake, 2 heap, 3 quick, 4 shell).
With `-init file` the file name is used as given; shell sort asks for its
ALPHA value on standard input:

```
ordenaciones-classic --help
ordenaciones-classic -size 20 -ord 3 -init random -trace y
ordenaciones-classic -size 8 -ord 0 -init file datos.txt -trace n
```

Build a tree (`abb`, `abe` or `avl`) and explore it with an interactive menu
(0 exit, 1 insert, 2 search, 3 show). `-init file datos` reads `datos.txt`:

```
ordenaciones-trees -ab avl -trace y -init random 10
ordenaciones-trees -ab abb -init file datos
ordenaciones-trees -ab abe -init manual
```

## What it does not do

The package has no bubble sort or merge sort on their own, and no command
that runs a fixed demonstration sequence; the sorts available are the ones
listed above, and the exercises in `ordenaciones.exercises` only use bubble
and merge steps as parts of their combined procedures.

## Running the tests

```
pip install .[test]
pytest
```