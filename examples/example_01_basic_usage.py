"""Example 01: Basic Usage - ArrayTable Fundamentals.

This example demonstrates the fundamental operations:
- Creating a table with a three-way key comparator
- insert() with last-write-wins for duplicate keys
- lookup() and the NOT_FOUND marker
- remove() and its swap-compaction of the entry order
- kill() through the context manager
"""

from arraytable import NOT_FOUND, ArrayTable, TableConfig, string_compare


def main():
    """Run basic usage example."""
    print("=" * 60)
    print("EXAMPLE 01: BASIC USAGE")
    print("=" * 60)

    with ArrayTable.empty(string_compare, config=TableConfig(capacity=8)) as t:
        print(f"\nNew table is empty: {t.is_empty()}")

        # Step 1: Insert three pairs
        for city, country in [("Umea", "SE"), ("Oslo", "NO"), ("Turku", "FI")]:
            t.insert(city, country)
        print("\nAfter three inserts:")
        t.print()

        # Step 2: Duplicate keys replace the stored value
        t.insert("Oslo", "Norway")
        print(f"\nlookup('Oslo') -> {t.lookup('Oslo')}")
        print(f"lookup('Bergen') is NOT_FOUND -> {t.lookup('Bergen') is NOT_FOUND}")

        # Step 3: Removing moves the last entry into the freed slot
        t.remove("Umea")
        print("\nAfter removing 'Umea' (note the new order):")
        t.print(lambda k, v: f"  {k} -> {v}")
        print(f"\nEntries left: {len(t)}")

    print(f"\nTable killed on exit: {t.closed}")


if __name__ == "__main__":
    main()
