import logging

from weather_odds import config
from weather_odds.app import create_app

logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger("weather_odds")

app = create_app()

if __name__ == '__main__':
    # For production run behind gunicorn or waitress: `gunicorn server:app`
    logger.info("Server running on http://localhost:%s", config.PORT)
    app.run(host=config.HOST, port=config.PORT, debug=config.DEBUG)
