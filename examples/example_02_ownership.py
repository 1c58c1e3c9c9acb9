"""Example 02: Ownership and Release Callbacks.

The table owns what is inserted into it. Keys and values it drops, by
overwrite, removal or kill, are handed to the release callbacks given at
creation. Entries moved during compaction or growth are never released.
"""

from arraytable import ArrayTable, CapacityExceededError, TableConfig, int_compare


class Buffer:
    """A caller-allocated resource that must be closed exactly once."""

    def __init__(self, name):
        self.name = name
        self.closed = False

    def close(self):
        assert not self.closed, f"{self.name} closed twice"
        self.closed = True
        print(f"  closed {self.name}")


def main():
    """Run ownership example."""
    print("=" * 60)
    print("EXAMPLE 02: OWNERSHIP AND RELEASE CALLBACKS")
    print("=" * 60)

    config = TableConfig(capacity=2)
    t = ArrayTable.empty(int_compare, value_release=Buffer.close, config=config)

    print("\n1. Overwriting key 1 closes the old buffer:")
    t.insert(1, Buffer("one-a"))
    t.insert(1, Buffer("one-b"))

    print("\n2. A full fixed-capacity table refuses new keys:")
    t.insert(2, Buffer("two"))
    spare = Buffer("three")
    try:
        t.insert(3, spare)
    except CapacityExceededError as e:
        print(f"  {e}")
    print(f"  caller still owns {spare.name}; closed={spare.closed}")
    spare.close()

    print("\n3. Removing key 1 closes its buffer; key 2 moves, untouched:")
    t.remove(1)

    print("\n4. kill() closes whatever is left:")
    t.kill()


if __name__ == "__main__":
    main()
