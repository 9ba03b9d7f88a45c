"""
Gnuplot Export Module

Writes a gnuplot command file and data file that draw the calibrated
plate as a 3D surface which can be zoomed, panned and rotated.

Usage:
    gnuplot -c gnuplot.cmd
"""
from pathlib import Path
from typing import Dict, List, Optional
import logging

from ..config.models import PlateSurvey
from ..config.settings import get_settings
from ..engine.surface import SurfaceTrace, plot_extent, surface_traces


logger = logging.getLogger(__name__)


Z_LABELS = {
    True: "height\\nin\\nmicrons",
    False: "height\\nin\\ntens of\\nmicroinch",
}


class GnuplotExporter:
    """Export a PlateSurvey as a gnuplot command and data file pair."""

    def __init__(self):
        self.settings = get_settings()
        self.encoding = self.settings.encoding.output_encoding

    def command_script(self, survey: PlateSurvey, data_name: Optional[str] = None) -> str:
        """
        Build the gnuplot command file.

        Args:
            survey: Completed PlateSurvey
            data_name: Name of the data file the script plots

        Returns:
            Script text
        """
        data_name = data_name or self.settings.files.gnuplot_data
        max_x, max_y = plot_extent(survey.lines)
        max_z = int(1.0 + survey.max_height)
        z_label = Z_LABELS[survey.config.is_metric]

        return (
            "# The following command file can be used with gnuplot to produce\n"
            "# a 3-dimensional plot of the surface plate. The associated data\n"
            f"# file is called \"{data_name}\" and can be found in this directory.\n"
            "#\n"
            "# On typical Unix/Linux/Mac systems, invoke gnuplot with:\n"
            "# gnuplot -c gnuplot.cmd\n"
            "\n"
            "set term X11 enhanced\n"
            "set xyplane at 0\n"
            f"set label \"N\" at {0.5 * max_x:f}, {1.1 * max_y:f}, {0.0:f}\n"
            f"set label \"S\" at {0.5 * max_x:f}, {-0.1 * max_y:f}, {0.0:f}\n"
            f"set label \"E\" at {1.1 * max_x:f}, {0.5 * max_y:f}, {0.0:f}\n"
            f"set label \"W\" at {-0.1 * max_x:f}, {0.5 * max_y:f}, {0.0:f}\n"
            f"set zrange [0:{max_z}]\n"
            f"set zlabel \"{z_label}\"\n"
            "set key off\n"
            f"splot [0:{max_x}][0:{max_y}][0:{max_z}] \"{data_name}\" using 1:2:3 with lines\n"
            "pause -1\n"
        )

    def data_file(self, traces: List[SurfaceTrace]) -> str:
        """
        Build the gnuplot data file: one block of "x y height" rows per
        line, blocks separated by two blank lines.
        """
        parts = [
            "# This is a data file for use with gnuplot.\n"
            "# The corresponding command file in this directory\n"
            "# is called \"gnuplot.cmd\". Together these can be\n"
            "# used to generate a 3-d plot of the surface plate height.\n"
            "\n\n"
        ]
        for trace in traces:
            parts.append(f"# {trace.label}\n")
            for x, y, height in trace.points[['X', 'Y', 'Height']].itertuples(index=False):
                parts.append(f"{x:f} {y:f} {height:f}\n")
            parts.append("\n\n")
        return "".join(parts)

    def export(self, output_dir: str, survey: PlateSurvey) -> Dict[str, str]:
        """
        Write the command and data files.

        Args:
            output_dir: Output folder, created if missing
            survey: Completed PlateSurvey

        Returns:
            Dictionary of written file paths
        """
        folder = Path(output_dir)
        folder.mkdir(parents=True, exist_ok=True)

        files = self.settings.files
        command_path = folder / files.gnuplot_command
        data_path = folder / files.gnuplot_data

        with open(command_path, 'w', encoding=self.encoding) as f:
            f.write(self.command_script(survey, files.gnuplot_data))

        with open(data_path, 'w', encoding=self.encoding) as f:
            f.write(self.data_file(surface_traces(survey)))

        logger.info(f"Exported gnuplot files to {folder}")
        return {'command': str(command_path), 'data': str(data_path)}


def export_gnuplot(output_dir: str, survey: PlateSurvey) -> Dict[str, str]:
    """Convenience function to write the gnuplot files."""
    return GnuplotExporter().export(output_dir, survey)
