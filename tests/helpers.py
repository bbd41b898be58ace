import os
import subprocess
import sys

from typing import Dict, List, Optional, Tuple


def run_command(
    command: List[str],
    env: Optional[Dict[str, str]] = None,
    cwd: Optional[str] = None,
) -> Tuple[int, List[str]]:
    if env is None:
        env = os.environ.copy()

    if cwd is None:
        cwd = os.getcwd()

    process = subprocess.run(
        command,
        env=env,
        cwd=cwd,
        stderr=subprocess.STDOUT,
        stdout=subprocess.PIPE,
    )

    return process.returncode, process.stdout.decode().splitlines()


def run_gherkin_lite(*args: str, cwd: Optional[str] = None) -> Tuple[int, List[str]]:
    return run_command([sys.executable, '-m', 'gherkin_lite', *args], cwd=cwd)
