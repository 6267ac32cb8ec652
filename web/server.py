# web/server.py
import logging
from typing import Optional

from flask import Flask, Response, jsonify, request

from utils.shared_state import AppState, LockUnavailable, SensorReading

log = logging.getLogger(__name__)

HARDWARE_DISPLAY_TEXT = "Hardware mode - content not available via API"


def create_app(state: AppState) -> Flask:
    app = Flask(__name__)

    def _sensor() -> Optional[SensorReading]:
        try:
            return state.read_sensor()
        except LockUnavailable:
            return None

    def _display_text() -> Optional[str]:
        try:
            return state.display_text()
        except LockUnavailable:
            return None

    @app.after_request
    def _cors(resp: Response) -> Response:
        resp.headers["Access-Control-Allow-Origin"] = "*"
        resp.headers["Access-Control-Allow-Headers"] = "content-type"
        resp.headers["Access-Control-Allow-Methods"] = "GET, POST, PUT"
        return resp

    @app.route("/")
    def hello():
        return Response("Raspberry Pi Zero Monitor is running!", mimetype="text/plain")

    @app.route("/status")
    def api_status():
        try:
            led_on = state.read_led()
        except LockUnavailable:
            led_on = False
        reading = _sensor()

        return jsonify(
            uptime_seconds=state.uptime_seconds(),
            led_status=led_on,
            last_sensor_reading=reading.to_dict() if reading is not None else None,
            display_content=_display_text(),
        )

    @app.route("/sensor")
    def api_sensor():
        reading = _sensor()
        if reading is None:
            return jsonify({"error": "No sensor data available"})
        return jsonify(reading.to_dict())

    @app.route("/led", methods=["POST"])
    def api_led():
        body = request.get_json(silent=True)
        on = body.get("state") if isinstance(body, dict) else None
        if not isinstance(on, bool):
            return jsonify({"error": "missing boolean 'state'"}), 400

        try:
            state.write_led(on)
        except LockUnavailable as e:
            log.error("Failed to control LED: %s", e)
            return jsonify({"success": False, "error": "Failed to access LED"})

        log.info("LED turned %s via API (%s)", "ON" if on else "OFF", state.mode)
        return jsonify({"success": True, "led_state": on})

    @app.route("/display")
    def api_display():
        if state.mode == "hardware":
            return jsonify({"display_content": HARDWARE_DISPLAY_TEXT, "mode": "hardware"})
        # None while the display lock is busy
        return jsonify({"display_content": _display_text(), "mode": "simulation"})

    return app
