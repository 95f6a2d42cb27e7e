# chainlist

`chainlist` provides `LinkedList`, a doubly linked list built from `Node`
objects. Both live in `chainlist.linked_list`. The list supports index-based
insertion, removal, range removal and sub-listing. It can also take an optional
*destructor*, which is a callable applied to each element that the list
discards.

## Installation

```
pip install chainlist
```

## Usage

```python
from chainlist.linked_list import LinkedList

items = LinkedList()            # or LinkedList(destructor)
items.append("azerty")
items.append("qwerty")
items.insert(1, "abc")          # ["azerty", "abc", "qwerty"]

items.get(0)                    # "azerty"
items[2]                        # "qwerty"
len(items)                      # 3
"abc" in items                  # True
items.count("abc")              # 1
items.index("qwerty")           # 2
items.last_index("azerty")      # 0

items.reverse()                 # ["qwerty", "abc", "azerty"]
items.remove_range(0, 1)        # ["abc", "azerty"]
items.to_list()                 # ["abc", "azerty"]
list(reversed(items))           # ["azerty", "abc"]
```

### Destructors

You can pass a callable to the constructor. It is called with each element the
list discards. The following operations call it:

- `remove_at`
- `remove`
- `remove_all`
- `remove_range`
- `sub_list`
- `clear` (this one works from the last element to the first)
- `replace`

`set` and item assignment (`items[i] = x`) overwrite an element without calling
the destructor.

```python
closed = []
handles = LinkedList(closed.append)
handles.append("a")
handles.append("b")
handles.remove_at(0)            # closed == ["a"]
handles.replace(0, "c")         # closed == ["a", "b"]
handles.destructor = None       # stop calling it
```

### Behaviour notes

- **Matching.** An element matches a value if it is that object or compares
  equal to it. This rule applies to `in`, `count`, `index`, `last_index`,
  `remove` and `remove_all`.
- **`remove` and `remove_all`.** Neither does anything when the value is absent.
- **Indices.** Only indices from `0` to `len - 1` are valid; negative indices
  are not supported.
- **Out-of-range indices.**
  - `items[i]`, `set`, `replace` and `remove_at` raise `IndexError`.
  - `get` returns `None` instead.
  - `insert` also accepts `len`, which appends.
- **`index` and `last_index`.** Both raise `ValueError` when the value is
  absent.
- **`remove_range(start, stop)`.**
  - It removes elements from `start` (inclusive) to `stop` (exclusive).
  - It raises `ValueError` if `start > stop`.
  - It raises `IndexError` if either bound is outside the list.
- **`sub_list(start, stop)`.**
  - It keeps the elements from `start` through `stop`, **both inclusive**, and
    discards the rest.
  - Its errors are the same as those of `remove_range`.
- **`copy()`.** It makes a new list with the same elements and the same
  destructor.
- **`is_empty()`.** It reports whether the list holds no elements.
- **`head` and `tail`.** These properties give the first and last `Node`, or
  `None` when the list is empty. Each `Node` has `data`, `prev` and `next`
  attributes.

## Running the tests

```
pip install chainlist[test]
pytest
```