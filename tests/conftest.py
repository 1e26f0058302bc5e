"""Shared fixtures: a fake requests session so nothing touches the network."""

import pytest
import requests

BASE = "https://pokeapi.test/api/v2"


class FakeResponse:
    def __init__(self, payload=None, status=200, bad_json=False):
        self.payload = payload
        self.status_code = status
        self.bad_json = bad_json

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error")

    def json(self):
        if self.bad_json:
            raise ValueError("Expecting value: line 1 column 1 (char 0)")
        return self.payload


class FakeSession:
    """maps url -> FakeResponse | Exception, records every call"""

    def __init__(self, routes=None):
        self.routes = dict(routes or {})
        self.calls = []

    def get(self, url, timeout=None):
        self.calls.append((url, timeout))
        route = self.routes.get(url)
        if route is None:
            return FakeResponse(status=404)
        if isinstance(route, Exception):
            raise route
        return route


def species_payload(names=(("Bulbizarre", "fr"), ("Bulbasaur", "en")), chain_url=f"{BASE}/evolution-chain/1/"):
    return {
        "names": [{"name": n, "language": {"name": lang}} for n, lang in names],
        "evolution_chain": {"url": chain_url},
    }


def pokemon_payload(name="bulbasaur", stats=(("hp", 45), ("attack", 49), ("defense", 49),
                                             ("special-attack", 65), ("special-defense", 65), ("speed", 45))):
    return {
        "name": name,
        "stats": [{"base_stat": base, "stat": {"name": stat}} for stat, base in stats],
    }


def chain_node(name, pid, children=()):
    return {
        "species": {"name": name, "url": f"{BASE}/pokemon-species/{pid}/"},
        "evolves_to": list(children),
    }


BULBASAUR_CHAIN = {
    "chain": chain_node("bulbasaur", 1, [chain_node("ivysaur", 2, [chain_node("venusaur", 3)])]),
}


@pytest.fixture
def fake_session():
    return FakeSession()


@pytest.fixture
def bulbasaur_routes():
    return {
        f"{BASE}/pokemon-species/1": FakeResponse(species_payload()),
        f"{BASE}/pokemon/1": FakeResponse(pokemon_payload()),
        f"{BASE}/evolution-chain/1/": FakeResponse(BULBASAUR_CHAIN),
    }
