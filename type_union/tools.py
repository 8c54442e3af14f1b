import logging
import subprocess
import sys

logger = logging.getLogger(__name__)


def cog_command(*filenames, include=(), check=False):
    """Returns the command line that runs cog over `filenames`.

    Files are rewritten in place unless `check` is set, in which case cog only
    reports files whose generated code is stale."""

    command = [sys.executable, "-m", "cogapp", "-e", "-U"]
    command.append("--check" if check else "-r")
    for path in include:
        command.extend(["-I", str(path)])
    command.extend(str(filename) for filename in filenames)
    return command


def run_cog(*filenames, include=(), check=False):
    command = cog_command(*filenames, include=include, check=check)
    logger.debug("running %s", " ".join(command))
    subprocess.check_call(command)
