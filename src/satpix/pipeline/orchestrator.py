"""Run the scene and series pipelines independently.

The two pipelines share no data. Each one fails fast internally; a failure
is logged and recorded, and the next pipeline still runs.
"""

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Dict, Optional

from satpix.pipeline.scene import ScenePipeline
from satpix.pipeline.series import SeriesPipeline

if TYPE_CHECKING:
    from satpix.schemas import InternalConfig

__all__ = ['PipelineOrchestrator']

logger = logging.getLogger(__name__)

PIPELINES = {
    "scene": ScenePipeline,
    "series": SeriesPipeline,
}


class PipelineOrchestrator:
    """Runs the configured pipelines in order and reports their status.

    **Logging:**

    All output goes to both console and log file (logs/satpix_pipeline.log).
    Log level controlled via config: "DEBUG", "INFO", "WARNING", "ERROR".

    Example usage::

        orch = PipelineOrchestrator(config, output_dirs)
        status = orch.run()        # {"scene": "completed", "series": "failed"}
        orch.results["scene"]["table"]
    """

    def __init__(self, config: "InternalConfig", output_dirs: Dict[str, Path],
                 configure_logging: bool = True):
        self.config = config
        self.output_dirs = output_dirs
        self.configure_logging = configure_logging
        self.results: Dict[str, dict] = {}
        self.errors: Dict[str, Exception] = {}

    def _setup_logging(self) -> None:
        """Configure root logger with file and console handlers."""
        log_level = getattr(logging, self.config.logging.level, logging.INFO)

        log_dir = Path(self.output_dirs.get("logs", "."))
        log_dir.mkdir(parents=True, exist_ok=True)
        log_path = log_dir / "satpix_pipeline.log"

        formatter = logging.Formatter(
            fmt='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )

        # Clear existing handlers and add new ones
        root = logging.getLogger()
        root.setLevel(log_level)
        for handler in root.handlers[:]:
            root.removeHandler(handler)

        fh = logging.FileHandler(log_path)
        fh.setLevel(log_level)
        fh.setFormatter(formatter)
        root.addHandler(fh)

        ch = logging.StreamHandler()
        ch.setLevel(log_level)
        ch.setFormatter(formatter)
        root.addHandler(ch)

        logger.info("Logging: level=%s, file=%s", self.config.logging.level, log_path)

    def run(self, pipelines: Optional[list] = None) -> Dict[str, str]:
        """Run each pipeline; a failure in one does not stop the others.

        Parameters
        ----------
        pipelines : list of str, optional
            Subset of ``"scene"``/``"series"``. Defaults to ``config.pipelines``.

        Returns
        -------
        dict
            Pipeline name to ``"completed"`` or ``"failed"``.
        """
        if self.configure_logging:
            self._setup_logging()

        names = list(pipelines if pipelines is not None else self.config.pipelines)
        status = {}

        logger.info("=" * 60)
        logger.info("Running pipelines: %s", ", ".join(names) or "none")
        logger.info("=" * 60)

        for name in names:
            logger.info("Starting %s pipeline...", name)
            try:
                pipeline = PIPELINES[name](self.config, self.output_dirs)
                self.results[name] = pipeline.run()
                status[name] = "completed"
                logger.info("✓ %s pipeline completed", name)
            except Exception as e:
                self.errors[name] = e
                status[name] = "failed"
                logger.exception("%s pipeline failed", name)

        logger.info("Summary: %s", ", ".join(f"{k}={v}" for k, v in status.items()))
        return status
