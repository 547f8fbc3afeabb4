DEFAULTS = {
    # FastAPI application title
    "APP_NAME": "decaygraph-backend",
    # Prefix for every API route
    "API_PREFIX": "",
    # Root logging level for the runner and the API process
    "LOG_LEVEL": "INFO",
    # Log line format passed to logging.basicConfig
    "LOG_FORMAT": "%(asctime)s %(levelname)s %(name)s %(message)s",
    # Log the rendered graph after every build
    "LOG_BUILD": True,
    # Smallest accepted expiration (hop budget)
    "MIN_EXPIRATION": 1,
    # Message emitted for each expiration query
    "REPORT_TEMPLATE": (
        "Can't reach {count} nodes starting at {start} "
        "with expiration of {expiration}"
    ),
    # Edge list loaded into the shared graph at startup ("" = start empty)
    "SEED_EDGES": "",
}
