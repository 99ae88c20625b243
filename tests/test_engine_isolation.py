import os
import subprocess
import sys

ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))


def test_engine_no_streamlit():
    """Ensure config and core can be imported without streamlit installed."""
    result = subprocess.run(
        [sys.executable, "-c",
         "import sys; sys.modules['streamlit']=None; "
         "import config.scenarios, config.cost_templates, core.portfolio, "
         "core.incremental, core.planning, core.sensitivity"],
        capture_output=True,
        cwd=ROOT,
    )
    assert result.returncode == 0, f"Engine import failed: {result.stderr.decode()}"
