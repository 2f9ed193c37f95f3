"""Debug the raw-text importer from the command line.

Usage: python scripts/convert_text.py recipe.txt
       cat recipe.txt | python scripts/convert_text.py
"""
import sys
import os

# Add api path to sys.path
sys.path.append(os.path.join(os.path.dirname(__file__), "../"))

from app.services.importer import convert_recipe_text


def main():
    if len(sys.argv) > 1:
        with open(sys.argv[1], encoding="utf-8") as f:
            text = f.read()
    else:
        text = sys.stdin.read()

    result, _ = convert_recipe_text(text)
    print(result.model_dump_json(indent=2))


if __name__ == "__main__":
    main()
