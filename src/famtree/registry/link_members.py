from __future__ import annotations

from typing import Optional

from famtree.registry.entities import Person


def link_child(
    child: Person,
    father: Optional[Person],
    mother: Optional[Person],
    root: Person,
) -> None:
    """
    Record a freshly created child's parents.

    Linking rules:
      - the child always records both parent handles it was given
      - the child is appended to exactly one child list: the father's when
        there is a father, otherwise the mother's
      - with no parents at all the child hangs under the root so the tree
        stays connected

    A child never appears in two child lists, so a generation scan that
    walks both co-parents cannot see it twice.
    """
    child.father = father.handle if father is not None else None
    child.mother = mother.handle if mother is not None else None

    if father is not None:
        father.add_child(child)
    elif mother is not None:
        mother.add_child(child)
    else:
        root.add_child(child)
