from datetime import datetime, timezone

from flask import Flask

from .app_utils import make_ok
from .config import setup_logger

logger = setup_logger(__name__)


def create_app() -> Flask:
    """Build the JSON API that hands normalized team views to the frontend."""
    app = Flask(__name__)

    from .routes.team_api import bp as team_api_bp

    app.register_blueprint(team_api_bp)
    logger.info("team_api_routes_registered prefix=%s", team_api_bp.url_prefix)

    @app.route("/health", methods=["GET"])
    def health():
        return make_ok(
            {"ok": True, "ts": datetime.now(timezone.utc).isoformat()},
            "OK",
            status_code=200,
        )

    return app


app = create_app()


if __name__ == "__main__":
    app.run(host="0.0.0.0", port=5000)
