"""Run the API with uvicorn: python -m crud_usuarios."""

import uvicorn

from crud_usuarios.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "crud_usuarios.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
