"""
Punto de entrada: python -m trackerprovider
"""

from trackerprovider.cli.app import app

if __name__ == "__main__":
    app()
