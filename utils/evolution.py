# utils/evolution.py
# Flatten an evolution chain into the single line shown on the page

from dataclasses import dataclass

ARTWORK_URL = (
    "https://raw.githubusercontent.com/PokeAPI/sprites/master/"
    "sprites/pokemon/other/official-artwork/{id}.png"
)

# well-formed chains are at most 3 deep; anything past this is bad data
MAX_EVOLUTION_DEPTH = 10

# ids are unsigned 64-bit; longer digit runs count as unparseable
MAX_UINT64 = 2**64 - 1


@dataclass(frozen=True)
class Evolution:
    name: str
    id: int
    image: str


def species_id(url: str) -> int:
    """trailing path segment of a species url as an unsigned 64-bit int, 0 if it isn't one"""
    last = (url or "").rstrip("/").rsplit("/", 1)[-1]
    if not last.isascii() or not last.isdigit():
        return 0
    value = int(last)
    if value > MAX_UINT64:
        return 0
    return value


def artwork_url(pid: int) -> str:
    return ARTWORK_URL.format(id=pid) if pid > 0 else ""


def walk_evolutions(root, max_depth: int = MAX_EVOLUTION_DEPTH) -> list[Evolution]:
    """
    Follow the first evolves_to branch from the root down to a leaf.
    Sibling branches are dropped. Stops on repeated nodes/urls or after max_depth entries.
    """
    out = []
    seen_nodes = set()
    seen_urls = set()
    node = root
    while node is not None and len(out) < max_depth:
        if id(node) in seen_nodes or (node.species_url and node.species_url in seen_urls):
            break
        seen_nodes.add(id(node))
        if node.species_url:
            seen_urls.add(node.species_url)

        pid = species_id(node.species_url)
        out.append(Evolution(name=node.species_name, id=pid, image=artwork_url(pid)))

        node = node.children[0] if node.children else None
    return out
