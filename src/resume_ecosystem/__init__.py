__version__ = "1.0.0"


def main() -> None:
    """Entry point for the application: runs the API server."""
    from resume_ecosystem.api.main import main as api_main

    api_main()
