import time

from flask import Flask, render_template, request

from utils import config
from utils.evolution import walk_evolutions
from utils.identifier import pokemon_id
from utils.logger import log_action, setup_logging
from utils.pokeapi import CatalogError, PokeAPIClient, make_session
from utils.stats import build_stats, labelize, radar_grid_string, radar_points_string, stat_color

app = Flask(__name__)
app.config["POKEAPI_CLIENT"] = PokeAPIClient(
    make_session(config.HTTP_TIMEOUT), base_url=config.POKEAPI_URL, timeout=config.HTTP_TIMEOUT
)
app.config["VERSION"] = config.VERSION

app.jinja_env.filters['labelize'] = labelize
app.jinja_env.filters['stat_color'] = stat_color


def load_stats(client: PokeAPIClient, pid: int):
    """stats are optional on the page: log and drop on failure"""
    try:
        return build_stats(client.get_stats(pid))
    except CatalogError as e:
        log_action(f"[WARN] failed to fetch pokemon stats: {e}", "warning")
        return []


def load_evolutions(client: PokeAPIClient, pid: int):
    try:
        return walk_evolutions(client.get_evolution_root(pid))
    except CatalogError as e:
        log_action(f"[WARN] failed to fetch evolution chain: {e}", "warning")
        return []


@app.route('/')
def index():
    """pick a pokemon from ?name= and render it"""
    start = time.perf_counter()
    client = app.config["POKEAPI_CLIENT"]
    name = request.args.get("name", "")
    pid = pokemon_id(name, config.CATALOG_SIZE)

    try:
        pokemon_name = client.get_display_name(pid)
    except CatalogError as e:
        log_action(f"[ERR] failed to get pokemon name: {e}", "error")
        return "failed to get pokemon name", 500

    stats = load_stats(client, pid)
    evolutions = load_evolutions(client, pid)

    page = render_template(
        "index.html",
        pokemon_id=pid,
        pokemon_name=pokemon_name,
        stats=stats,
        radar_points=radar_points_string(stats),
        radar_grid=radar_grid_string(len(stats)),
        radar_half=radar_grid_string(len(stats), 50),
        evolutions=evolutions,
        name=name,
        version=app.config["VERSION"],
    )

    elapsed_ms = (time.perf_counter() - start) * 1000
    log_action(f"generated page in {elapsed_ms:.1f}ms with pokemon id: {pid} for name: {name}")
    return page


def main():
    setup_logging(config.LOG_LEVEL)
    log_action(f"starting quelpoke app on http://{config.ADDR}:{config.PORT}")
    app.run(host=config.ADDR, port=config.PORT)


if __name__ == '__main__':
    main()
