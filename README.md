# bintree

A small binary tree library for integer values. Each node holds a value, a
link to its parent and links to its left and right children. The package
also measures trees (height, depth, size, leaves, balance, fullness,
perfection), finds sibling and uncle nodes, and draws a tree as text.

## Installation

```
pip install .
```

Python 3.10 or newer is required. The package has no runtime dependencies.

## Building a tree

```python
from bintree.node import Node

root = Node(98)
root.add_left(12)
root.add_right(402)

root.left.insert_right(54)
root.insert_right(128)
```

`Node(value, parent=None)` creates a node. Passing a parent only sets the
node's `parent` link; it does not attach the node as a child.

- `add_left(value)` / `add_right(value)` attach a new leaf on that side and
  return it. A child already on that side is replaced and its `parent` link
  is cleared.
- `insert_left(value)` / `insert_right(value)` put a new node between the
  node and its current child on that side and return it; the old child
  becomes the new node's child on the same side.
- `is_leaf()` tells whether the node has no children.
- `delete()` detaches the node from its parent and clears the parent and
  child links of every node in its subtree.

## Measuring

```python
from bintree import metrics

metrics.height(root)            # edges on the longest downward path
metrics.depth(root.right)       # edges from the node up to the root
metrics.size(root)              # number of nodes
metrics.leaves(root)            # nodes without children
metrics.inner_nodes(root)       # nodes with at least one child
metrics.balance(root)           # levels in left subtree minus levels in right subtree
metrics.is_full(root)           # every node has zero or two children
metrics.is_perfect(root)        # full, with all leaves on the same level
metrics.is_leaf(root.left)      # the node exists and has no children
metrics.sibling(root.left)      # the other child of the same parent, or None
metrics.uncle(root.left.right)  # the parent's sibling, or None
```

Every function accepts `None` for an empty tree: the counting functions
return 0, the checks return `False`, and `sibling` / `uncle` return `None`.

## Drawing

```python
from bintree.render import render, print_tree

text = render(root)   # the drawing as a string, each line ending in a newline
print_tree(root)      # writes the drawing to standard output
```

For the tree built above this prints

```
  .-------(098)--.
(012)--.       (128)--.
     (054)          (402)
```

Values are written zero-padded to at least three digits inside parentheses.
`print_tree(tree, file)` writes to any text stream instead of standard
output. An empty tree (`None`) draws as an empty string.

## What it does not do

This is a library only: there is no command-line tool. Trees are held in
memory and are not saved or loaded.

## Running the tests

```
pip install ".[test]"
pytest
```