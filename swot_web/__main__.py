from swot_web.app_factory import create_app

if __name__ == "__main__":
    app = create_app()
    app.run(
        host=app.config["HOST"],
        port=app.config["PORT"],
        debug=app.config["DEBUG"],
        threaded=app.config["THREADED"],
    )

# python -m swot_web
#
# Reads swot_web.ini from the repository root (or the file named by APP_INI),
# creates the data directory if needed, and serves the JSON API plus
# /integration.js with Flask's built-in server, one request at a time.
