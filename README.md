# multiorder

`multiorder` provides `MyContainer`, a small collection that keeps elements in
the order they were added. You can walk those elements in several different
orders.

## Installation

```
pip install multiorder
```

## Usage

```python
from multiorder.container import MyContainer

c = MyContainer([7, 15, 6, 1, 2])
c.add_element(3)
c.remove_element(3)      # removes every 3; raises ValueError if none was present

len(c)                   # 5
str(c)                   # "[7, 15, 6, 1, 2]"

list(c.order())            # [7, 15, 6, 1, 2]   insertion order
list(c.ascending_order())  # [1, 2, 6, 7, 15]
list(c.descending_order()) # [15, 7, 6, 2, 1]
list(c.reverse_order())    # [2, 1, 6, 15, 7]   last added first
list(c.side_cross_order()) # [1, 15, 2, 7, 6]   smallest, largest, next smallest, ...
list(c.middle_out_order()) # [6, 15, 1, 7, 2]   middle, then alternately left and right
```

- `MyContainer()` with no argument starts empty.
- Iterating the container directly (`for x in c`) follows insertion order.
- Each traversal method returns a new iterator over a snapshot of the elements
  taken when you call it. Changes you make to the container afterwards do not
  affect an iterator that already exists.
- The sorted traversals need elements that can be compared with each other,
  such as integers, floats or strings.
- `middle_out_order` works on insertion order and starts at index `len(c) // 2`.

## Demo

To print the size of a sample container and each of its traversal orders, run:

```
multiorder-demo
```

You can also run it as `python -m multiorder.demo`.

## Running the tests

```
pip install multiorder[test]
pytest
```