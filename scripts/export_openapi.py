"""Write the API contract (OpenAPI JSON) to a file.

    python -m scripts.export_openapi --out docs/openapi.json
"""

import argparse
import json

from src.api.app import create_app


def main() -> None:
    p = argparse.ArgumentParser()
    p.add_argument("--out", required=True)
    args = p.parse_args()

    schema = create_app().openapi()
    with open(args.out, "w", encoding="utf-8") as f:
        json.dump(schema, f, ensure_ascii=False, indent=2)


if __name__ == "__main__":
    main()
