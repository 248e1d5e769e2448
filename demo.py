import logging
import os
from collections.abc import Sequence

from bstmap import BinarySearchTree, OrderedMapError
from bstmap.models import Student

logger = logging.getLogger()

ROSTER = (
    (101, "Amanda", 85.5),
    (205, "Carlos", 92.0),
    (310, "Eduardo", 78.5),
    (407, "Gabriel", 81.0),
    (503, "João", 76.0),
    (612, "Luciana", 89.0),
    (709, "Maria", 95.5),
    (804, "Pedro", 79.0),
    (908, "Renata", 88.0),
)


def build_student_tree(roster: Sequence[tuple[int, str, float]] = ROSTER) -> BinarySearchTree:
    """Create a tree of students keyed by name, skipping entries that fail to insert."""
    tree = BinarySearchTree()
    for registration, name, grade in roster:
        student = Student(registration, name, grade)
        try:
            tree.insert(student.name, student)
        except OrderedMapError as e:
            logger.error(f"Could not insert student {name}: {e}")
    return tree


def section(title: str) -> None:
    print(f"\n===== {title} =====")


def main() -> None:
    students = build_student_tree()

    section("Initial student tree")
    print(f"Tree size: {students.size()}")
    print("\nIn-order traversal:")
    print(students.traverse())

    section("Pre-order traversal")
    print("\n".join(str(s) for s in students.pre_order()))

    section("Post-order traversal")
    print("\n".join(str(s) for s in students.post_order()))

    section("Descending traversal")
    print("\n".join(str(s) for s in students.descending()))

    section("Minimum")
    print("Student with the smallest key:")
    print(students.min())

    section("Clone")
    cloned = students.clone()
    print(f"Clone has the same size: {cloned.size() == students.size()}")
    print("Removing 'Maria' from the original tree...")
    students.remove("Maria")
    print(f"Original size after removal: {students.size()}")
    print(f"Clone size (unchanged): {cloned.size()}")

    section("Subset of keys >= 'K'")
    at_least_k = cloned.subset_at_least("K")
    print(f"Subset size: {at_least_k.size()}")
    print(at_least_k.traverse())
    print("Subset of keys >= 'Z' (expected to fail):")
    try:
        cloned.subset_at_least("Z")
    except OrderedMapError as e:
        print(f"Expected error: {e}")

    section("Root check")
    root_name = cloned.pre_order()[0].name
    print(f"Root name (first in pre-order): {root_name}")
    print(f"Is '{root_name}' the root: {cloned.is_root(root_name)}")
    print(f"Is 'Pedro' the root: {cloned.is_root('Pedro')}")

    section("Predecessor")
    print("Predecessor of 'Maria':")
    print(cloned.predecessor("Maria"))
    print("Predecessor of the smallest key (expected to fail):")
    try:
        cloned.predecessor(cloned.min().name)
    except OrderedMapError as e:
        print(f"Expected error: {e}")

    section("Mean value")
    print(f"Class grade mean: {cloned.aggregate(lambda s: s.grade):.2f}")
    print(f"Registration mean: {cloned.aggregate(lambda s: float(s.registration)):.1f}")

    section("Count matching")
    print(f"Students with grade > 80: {cloned.count_matching(lambda s: s.grade > 80.0)}")
    print(
        "Students whose name starts with 'M': "
        f"{cloned.count_matching(lambda s: s.name.startswith('M'))}"
    )


if __name__ == "__main__":
    logging.basicConfig(
        level=os.environ.get("LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s - %(levelname)s - %(message)s",
    )
    main()
