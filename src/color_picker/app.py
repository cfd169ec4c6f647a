from __future__ import annotations

import logging
from typing import Any, Callable, Mapping, Optional

import numpy as np
from flask import Flask, jsonify, request

from .session import ACTIONS, PickerSession

log = logging.getLogger(__name__)

DEFAULTS: Mapping[str, Any] = {
    "PICKER_SEED": None,  # int → reproducible randomize()
    "PICKER_INITIAL_COLOR": None,  # CSS color text applied at start-up
}


def _body() -> dict:
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


# ----------------------------- Flask app ----------------------------------


def create_app(config: Optional[Mapping[str, Any]] = None) -> Flask:
    app = Flask(__name__)
    app.config.from_mapping(DEFAULTS)
    if config:
        app.config.from_mapping(config)
    logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")

    session = PickerSession(rng=np.random.default_rng(app.config["PICKER_SEED"]))
    initial = app.config["PICKER_INITIAL_COLOR"]
    if initial and not session.parse(initial):
        raise ValueError(f"invalid PICKER_INITIAL_COLOR: {initial!r}")
    app.extensions["color_picker"] = session

    def respond(change: Callable[[], None]):
        try:
            change()
        except (TypeError, ValueError) as exc:
            return jsonify({"error": str(exc)}), 400
        except Exception as exc:
            log.exception("Color update failed")
            return jsonify({"error": str(exc)}), 500
        return jsonify(session.state())

    @app.route("/color")
    def color():
        return jsonify(session.state())

    @app.route("/color/channel/<channel>", methods=["POST"])
    def set_channel(channel: str):
        body = _body()
        if "value" not in body:
            return jsonify({"error": "missing 'value'"}), 400
        return respond(lambda: session.drag(channel, body["value"]))

    @app.route("/color/space/<colorspace>", methods=["POST"])
    def set_space(colorspace: str):
        values = _body().get("values")
        if not isinstance(values, list):
            return jsonify({"error": "'values' must be a list of 3 numbers"}), 400
        return respond(lambda: session.set_colorspace(colorspace, values))

    @app.route("/color/parse", methods=["POST"])
    def parse():
        text = _body().get("text")
        if not isinstance(text, str) or not session.parse(text):
            return jsonify({"error": f"invalid color: {text!r}"}), 400
        return jsonify(session.state())

    @app.route("/color/<action>", methods=["POST"])
    def act(action: str):
        if action not in ACTIONS:
            return (
                jsonify({"error": f"unknown action '{action}'", "supported": sorted(ACTIONS)}),
                400,
            )
        return respond(lambda: session.apply(action))  # type: ignore[arg-type]

    return app


if __name__ == "__main__":
    create_app().run(debug=False, threaded=True)
