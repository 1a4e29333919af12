from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import asdict

from .datasets import DEMO_DOCUMENTS, load_documents
from .index.rank import SCORING_METHODS
from .pipeline import PipelineResult, analyze
from .settings import RankingConfig, config_from_cfg, load_config


def print_tables(result: PipelineResult) -> None:
    terms = list(result.vocabulary)
    header = "doc  " + "  ".join(f"{t:>12}" for t in terms)

    print("TF")
    print(header)
    for i, row in enumerate(result.tf, start=1):
        print(f"{i:<4} " + "  ".join(f"{row[t]:12.4f}" for t in terms))

    print("IDF")
    print("     " + "  ".join(f"{result.idf[t]:12.4f}" for t in terms))

    print("TF-IDF")
    print(header + f"  {'sum':>12}")
    for i, row in enumerate(result.tfidf, start=1):
        print(f"{i:<4} " + "  ".join(f"{row[t]:12.4f}" for t in terms) + f"  {result.sums[i - 1]:12.4f}")


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Rank documents by TF-IDF similarity to a reference document")
    p.add_argument("--docs", help="Text file (one document per line) or JSONL with a 'text' field")
    p.add_argument("--text-key", default="text", help="JSONL field holding the document text (default text)")
    p.add_argument("--config", help="YAML ranking config")
    p.add_argument("--reference", type=int, help="0-based index of the reference document")
    p.add_argument("--scoring", choices=SCORING_METHODS, help="Score by TF-IDF sum (default) or cosine")
    p.add_argument("--k", type=int, help="Print the top-k ranking instead of only the best match")
    p.add_argument("--show-tables", action="store_true", help="Print TF, IDF and TF-IDF tables")
    p.add_argument("--log-level", default="WARNING", help="Logging level (default WARNING)")
    return p


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")

    overrides = {}
    if args.reference is not None:
        overrides["reference_index"] = args.reference
    if args.scoring is not None:
        overrides["scoring"] = args.scoring
    if args.k is not None:
        overrides["top_k"] = args.k
    if args.show_tables:
        overrides["show_tables"] = True

    try:
        cfg = load_config(args.config) if args.config else RankingConfig()
        cfg = config_from_cfg({**asdict(cfg), **overrides})
        documents = load_documents(args.docs, text_key=args.text_key) if args.docs else list(DEMO_DOCUMENTS)
        result = analyze(documents, reference_index=cfg.reference_index, scoring=cfg.scoring)
    except (OSError, ValueError) as e:  # unreadable input, bad option, or TfidfRankError
        print(f"Error: {e}", file=sys.stderr)
        return 2

    if cfg.show_tables:
        print_tables(result)

    if cfg.top_k is None:
        print(result.most_similar)
    else:
        for r in result.ranking[: cfg.top_k]:
            print(f"{r.position}\t{r.score:.6f}\t{result.documents[r.idx]}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
