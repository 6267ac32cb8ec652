# main.py
import argparse
import logging
import sys

import config
from sensors.dht_sensor import make_reader
from tasks import start_tasks
from utils.shared_state import StartupError, build_state
from web.server import create_app

log = logging.getLogger("pimonitor")


def main() -> None:
    parser = argparse.ArgumentParser()
    parser.add_argument("--mode", choices=["hardware", "simulation"], default=config.MODE)
    parser.add_argument("--port", type=int, default=config.HTTP_PORT)
    args = parser.parse_args()

    logging.basicConfig(
        level=getattr(logging, config.LOG_LEVEL, logging.INFO),
        format="%(asctime)s - %(levelname)s - [%(name)s] %(message)s",
    )
    log.info("Starting Raspberry Pi Zero monitor (%s mode)", args.mode)

    try:
        state = build_state(args.mode)
    except StartupError as e:
        log.critical("Startup failed: %s", e)
        sys.exit(1)
    log.info("Application initialized successfully")

    read_once = make_reader(config.SENSOR_SOURCE, config.DHT_MODEL, config.DHT_BOARD_PIN)
    tasks = start_tasks(state, read_once)

    app = create_app(state)
    log.info("Starting web server on port %d", args.port)
    try:
        app.run(host=config.HTTP_HOST, port=args.port, debug=False, use_reloader=False, threaded=True)
    except KeyboardInterrupt:
        pass
    finally:
        for t in tasks:
            t.stop(timeout=1.0)
        if state.mode == "hardware":
            import RPi.GPIO as GPIO

            GPIO.cleanup()
        log.info("Shutting down.")


if __name__ == "__main__":
    main()
