"""
Script de serveur de développement du tableau de bord.

`OFFLINE=1` active le repli sur les données simulées avant le chargement de l'application: une
source amont injoignable affiche des valeurs simulées au lieu de tirets.
"""

import os

# Les settings sont lus à l'import du conteneur
if os.environ.get("OFFLINE") == "1":
    os.environ.setdefault("MOCK_FALLBACK", "true")

import uvicorn

from oceaninsight.app.main import app


def main():
    """Lance l'application FastAPI avec uvicorn (HOST/PORT depuis l'environnement)."""
    host = os.environ.get("HOST", "127.0.0.1")
    port = int(os.environ.get("PORT", "8000"))
    uvicorn.run(app, host=host, port=port, reload=False)


if __name__ == "__main__":
    main()
