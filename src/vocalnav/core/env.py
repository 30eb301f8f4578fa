"""Environment setup and logging for vocalnav.

setup_environment() should be called before litellm is first imported
so its debug banners and telemetry stay quiet in a CLI context.
"""

import logging
import os
import warnings

LOGGER = logging.getLogger("vocalnav")


def setup_environment() -> None:
    """Configure warning filters and env vars before library imports."""
    warnings.filterwarnings("ignore", category=DeprecationWarning)
    warnings.filterwarnings("ignore", category=FutureWarning)

    os.environ.setdefault("LITELLM_LOG", "ERROR")
    os.environ.setdefault("LITELLM_LOCAL_MODEL_COST_MAP", "True")
