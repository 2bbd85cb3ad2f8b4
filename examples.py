"""
Examples of using capillary's Dictionary for partial key search.
"""

from capillary import Dictionary, InvalidKeyPartError
from find_replace import find_and_replace, replace_text


def example_basic_usage():
    """Basic creation and whole-key access."""
    print("=== Basic Usage ===")

    emoticons = Dictionary()
    emoticons.insert(":D", "Hi there")
    emoticons.insert(":)", "Hello")

    print(f"':D' -> {emoticons.get(':D')}")
    print(f"':)' -> {emoticons[':)']}")
    print(f"':(' -> {emoticons.get(':(', '<missing>')}")
    print(f"Pairs stored: {len(emoticons)}")
    print()


def example_partial_search():
    """Feed key parts one at a time."""
    print("=== Partial Search ===")

    emoticons = Dictionary([(":D", "Hi there"), (":)", "Hello")])
    lookup = emoticons.lookup()

    for part in ":x:D":
        try:
            lookup.partial_search(part)
        except InvalidKeyPartError:
            print(f"{part!r}: no key continues here, back at the root")
            continue
        value = lookup.try_resolve()
        print(f"{part!r}: depth {lookup.depth}, resolves to {value!r}")
        if value is not None:
            lookup.reset()
    print()


def example_find_and_replace():
    """Streaming replacement over characters and tokens."""
    print("=== Find and Replace ===")

    emoticons = Dictionary([(":D", "Hi there"), (":)", "Hello")])
    print(replace_text(emoticons, "Say :D and :) to everyone"))

    states = Dictionary([
        (["new", "york"], "NY"),
        (["new", "jersey"], "NJ"),
        (["new", "mexico"], "NM"),
    ])
    tokens = "flights from new jersey to new york".split()
    print(" ".join(find_and_replace(states, tokens)))
    print()


def example_tie_break():
    """First insert wins unless overwrite=True."""
    print("=== Re-inserting a Key ===")

    pairs = [("key", "first"), ("key", "second")]
    print(f"default:        {Dictionary(pairs).get('key')}")
    print(f"overwrite=True: {Dictionary(pairs, overwrite=True).get('key')}")
    print()


if __name__ == "__main__":
    example_basic_usage()
    example_partial_search()
    example_find_and_replace()
    example_tie_break()

    print("All examples completed!")
