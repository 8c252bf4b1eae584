"""python -m sitebuilder"""

from sitebuilder.app.cli import run

if __name__ == "__main__":
    run()
