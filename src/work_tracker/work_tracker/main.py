from __future__ import annotations

from typing import Optional

from flask import Flask

from .api.controller import register as register_api
from .container import Container
from .settings import configure_logging, container_from_settings, load_settings


def create_app(container: Optional[Container] = None) -> Flask:
    app = Flask(__name__)

    if container is None:
        settings = load_settings()
        configure_logging(settings)
        app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
        container = container_from_settings(settings)

        if app.config["DEBUG"]:
            app.logger.info(
                "[work-tracker] ledger_dir=%s state_file=%s",
                container.ledger_repo.root_dir,
                container.pending_store.path,
            )

    register_api(app, container)
    return app
