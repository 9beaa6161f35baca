"""CLI for rendering the all-brands graph and one graph per brand to SVG files"""

import argparse
from pathlib import Path

from loguru import logger

from scentgraph.catalog import BRANDS
from scentgraph.config import settings
from scentgraph.graph.styling import InteractionState
from scentgraph.pipeline import GraphPipeline
from scentgraph.render.svg import SvgRenderer
from scentgraph.sources.csv_source import CsvRecordSource


def main(
    in_file: str,
    out_folder: str,
    highlight: str = "none",
    brands: list[str] | None = None,
) -> list[Path]:
    # Setup paths and services
    output = Path(out_folder)
    output.mkdir(parents=True, exist_ok=True)
    records = CsvRecordSource(in_file).load()
    pipeline = GraphPipeline.default(label_offset=settings.label_offset)
    renderer = SvgRenderer(settings.templates_dir)
    state = InteractionState(highlight_category=highlight)

    views = [(None, "overview", settings.overview_width, settings.overview_height)]
    views += [
        (brand, brand, settings.brand_width, settings.brand_height) for brand in brands or BRANDS
    ]

    written = []
    for brand, name, width, height in views:
        scene = pipeline.build_scene(records, brand=brand, width=width, height=height)
        if scene.is_empty:
            logger.warning(f"No links above threshold {scene.weight_threshold} for {name}")
        path = output / f"{name}.svg"
        path.write_text(renderer.render(scene, state), encoding="utf-8")
        logger.info(f"Wrote {path} ({len(scene.nodes)} nodes, {len(scene.links)} links)")
        written.append(path)

    return written


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    parser.add_argument(
        "--in-file",
        type=str,
        required=False,
        help="CSV file with Brand, Top, Middle and Base columns",
        default=settings.data_path,
    )
    parser.add_argument(
        "--out-folder", type=str, required=True, help="Folder to write the SVG files to"
    )
    parser.add_argument(
        "--highlight",
        type=str,
        required=False,
        choices=["top", "middle", "base", "none"],
        help="Note role to highlight",
        default="none",
    )
    parser.add_argument(
        "--brand",
        action="append",
        dest="brands",
        help="Brand to render, may be repeated. Defaults to every known brand",
    )

    args = parser.parse_args()

    main(
        in_file=args.in_file,
        out_folder=args.out_folder,
        highlight=args.highlight,
        brands=args.brands,
    )
