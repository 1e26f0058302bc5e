# utils/pokeapi.py
# PokeAPI catalog client: display name, base stats, evolution chain

from dataclasses import dataclass, field

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from utils.config import HTTP_TIMEOUT, POKEAPI_URL

FRENCH = "fr"

# hard stop for decoding nested evolves_to lists
MAX_LINEAGE_DEPTH = 16


class CatalogError(Exception):
    """transport failure or unexpected payload from the catalog"""


@dataclass
class LineageNode:
    species_name: str
    species_url: str
    children: list = field(default_factory=list)


# --------------------------------------------------------------------------- #
# Transport
# --------------------------------------------------------------------------- #

class TimeoutHTTPAdapter(HTTPAdapter):
    """HTTPAdapter that applies a default timeout when the caller gives none."""

    def __init__(self, *args, timeout: float = HTTP_TIMEOUT, **kwargs):
        self.timeout = timeout
        super().__init__(*args, **kwargs)

    def send(self, request, **kwargs):
        if kwargs.get("timeout") is None:
            kwargs["timeout"] = self.timeout
        return super().send(request, **kwargs)


def make_session(timeout: float = HTTP_TIMEOUT) -> requests.Session:
    """session with a bounded timeout and retries switched off"""
    session = requests.Session()
    adapter = TimeoutHTTPAdapter(timeout=timeout, max_retries=Retry(total=0))
    session.mount("https://", adapter)
    session.mount("http://", adapter)
    session.headers.update({"Accept": "application/json"})
    return session


# --------------------------------------------------------------------------- #
# Payload decoding
# --------------------------------------------------------------------------- #

def _species_ref(data) -> tuple[str, str]:
    """(name, url) of a chain node; a missing/null species decodes as empty"""
    species = data.get("species")
    if species is None:
        return "", ""
    if not isinstance(species, dict):
        raise CatalogError("chain node species must be an object")
    name = species.get("name")
    url = species.get("url")
    name = "" if name is None else name
    url = "" if url is None else url
    if not isinstance(name, str) or not isinstance(url, str):
        raise CatalogError("species name/url must be strings")
    return name, url


def decode_lineage(data, max_depth: int = MAX_LINEAGE_DEPTH, _seen=None) -> LineageNode:
    """
    Decode one evolution chain node (and its evolves_to subtree) into LineageNode.
    null decodes as an empty node. Children are kept up to the first one that
    can't be decoded; that entry and every sibling after it are dropped.
    A wrongly typed root raises.
    """
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise CatalogError(f"chain node must be an object, got {type(data).__name__}")
    name, url = _species_ref(data)
    node = LineageNode(species_name=name, species_url=url)

    seen = (_seen or frozenset()) | {id(data)}
    if max_depth <= 1:
        return node

    raw_children = data.get("evolves_to") or []
    if not isinstance(raw_children, list):
        return node
    for child in raw_children:
        if child is not None and id(child) in seen:
            break
        try:
            node.children.append(decode_lineage(child, max_depth - 1, seen))
        except CatalogError:
            break
    return node


def parse_display_name(species_json) -> str | None:
    """french name from a species payload, None when there is none"""
    if not isinstance(species_json, dict):
        raise CatalogError("species payload must be an object")
    names = species_json.get("names") or []
    if not isinstance(names, list):
        raise CatalogError("species names must be a list")
    for entry in names:
        if not isinstance(entry, dict):
            continue
        lang = entry.get("language") or {}
        if isinstance(lang, dict) and lang.get("name") == FRENCH:
            name = entry.get("name")
            if isinstance(name, str):
                return name
    return None


def parse_stats(pokemon_json) -> list[tuple[str, int]]:
    """(stat name, base stat) pairs in the order the API lists them"""
    if not isinstance(pokemon_json, dict):
        raise CatalogError("pokemon payload must be an object")
    stats = pokemon_json.get("stats")
    if not isinstance(stats, list):
        raise CatalogError("pokemon payload has no stats list")
    out = []
    for s in stats:
        try:
            base = s["base_stat"]
            name = s["stat"]["name"]
        except (KeyError, TypeError) as e:
            raise CatalogError(f"malformed stat entry: {s!r}") from e
        if isinstance(base, bool) or not isinstance(base, int) or not isinstance(name, str):
            raise CatalogError(f"malformed stat entry: {s!r}")
        out.append((name, base))
    return out


# --------------------------------------------------------------------------- #
# Client
# --------------------------------------------------------------------------- #

class PokeAPIClient:
    """Read-only access to the catalog. No caching, no retries."""

    def __init__(self, session=None, base_url: str = POKEAPI_URL, timeout: float = HTTP_TIMEOUT):
        self.session = session if session is not None else make_session(timeout)
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    def _json_fetch(self, url: str):
        try:
            r = self.session.get(url, timeout=self.timeout)
            r.raise_for_status()
            return r.json()
        except requests.RequestException as e:
            raise CatalogError(f"GET {url} failed: {e}") from e
        except ValueError as e:
            raise CatalogError(f"GET {url} returned invalid JSON: {e}") from e

    def species_url(self, pid: int) -> str:
        return f"{self.base_url}/pokemon-species/{pid}"

    def pokemon_url(self, pid: int) -> str:
        return f"{self.base_url}/pokemon/{pid}"

    def get_display_name(self, pid: int) -> str:
        """french species name, falling back to the pokemon endpoint name"""
        name = parse_display_name(self._json_fetch(self.species_url(pid)))
        if name is not None:
            return name

        data = self._json_fetch(self.pokemon_url(pid))
        fallback = data.get("name") if isinstance(data, dict) else None
        if not isinstance(fallback, str):
            raise CatalogError(f"pokemon {pid} payload has no name")
        return fallback

    def get_stats(self, pid: int) -> list[tuple[str, int]]:
        return parse_stats(self._json_fetch(self.pokemon_url(pid)))

    def get_evolution_root(self, pid: int) -> LineageNode:
        species = self._json_fetch(self.species_url(pid))
        try:
            chain_url = species["evolution_chain"]["url"]
        except (KeyError, TypeError) as e:
            raise CatalogError(f"species {pid} has no evolution chain") from e
        if not isinstance(chain_url, str) or not chain_url:
            raise CatalogError(f"species {pid} has no evolution chain")

        data = self._json_fetch(chain_url)
        if not isinstance(data, dict):
            raise CatalogError("evolution chain payload must be an object")
        return decode_lineage(data.get("chain"))
