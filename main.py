from src.app_factory import create_app


if __name__ == "__main__":
    """
    Development entrypoint for the clinic scheduling API.
    """
    app = create_app()
    app.run(host="0.0.0.0", port=5001, debug=app.config.get("DEBUG", False))
