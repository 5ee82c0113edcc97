"""Render a triangulation to an image file."""

from pathlib import Path
from typing import Optional, Union

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt
import numpy as np
import structlog

logger = structlog.get_logger()


def plot_triangulation(coordinates: np.ndarray, simplices: np.ndarray,
                       output_path: Union[str, Path], title: Optional[str] = None,
                       dpi: int = 150) -> Path:
    """
    Draw triangle edges and input points with matplotlib.

    Args:
        coordinates: (n, 2) point coordinates
        simplices: (m, 3) vertex indices into coordinates
        output_path: Image file to write; format follows the suffix
        title: Optional figure title
        dpi: Output resolution

    Returns:
        Path of the written image
    """
    coordinates = np.asarray(coordinates, dtype=np.float64)
    simplices = np.asarray(simplices, dtype=np.int64).reshape(-1, 3)
    output_path = Path(output_path)

    fig, ax = plt.subplots(figsize=(8, 8))
    if len(simplices):
        ax.triplot(coordinates[:, 0], coordinates[:, 1], simplices, color="steelblue", linewidth=0.8)
    ax.scatter(coordinates[:, 0], coordinates[:, 1], s=8, color="black", zorder=3)
    ax.set_aspect("equal")
    ax.set_title(title or f"Delaunay triangulation ({len(coordinates)} points, {len(simplices)} triangles)")

    fig.savefig(output_path, dpi=dpi, bbox_inches="tight")
    plt.close(fig)

    logger.info("Triangulation plot saved", path=str(output_path))
    return output_path
