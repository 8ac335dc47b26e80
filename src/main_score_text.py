import argparse
import sys

from src.domain.services.sentiment_scorer import (
    bucket_for_score,
    classify_score,
    score_text,
)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Score free text against the financial sentiment lexicon"
    )
    parser.add_argument("texts", nargs="+", help="One or more texts to score")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)

    for text in args.texts:
        score = score_text(text)
        print(
            f"{score:+d}\t{classify_score(score).value}\t"
            f"{bucket_for_score(score).value}\t{text}"
        )

    return 0


if __name__ == "__main__":
    sys.exit(main())
