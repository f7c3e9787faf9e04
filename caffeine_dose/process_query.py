"""Query the running keep-awake process through pgrep and ps"""

import os
import subprocess
from datetime import datetime
from typing import List, Optional

from .config import config
from .models import ProcessSnapshot

# ps -o lstart output, e.g. "Mon Oct 19 14:03:22 2026"
LSTART_FORMAT = '%a %b %d %H:%M:%S %Y'


class ProcessQueryError(Exception):
    """Raised when the process table could not be read"""


class ProcessQuery:
    """Capability to look up the keep-awake process"""

    def query(self) -> Optional[ProcessSnapshot]:
        """
        Look up the keep-awake process

        Returns:
            ProcessSnapshot if the process is running, None otherwise

        Raises:
            ProcessQueryError: If the lookup itself failed
        """
        raise NotImplementedError

    def is_running(self) -> bool:
        return self.query() is not None


def parse_ps_line(line: str) -> ProcessSnapshot:
    """
    Parse one line of `ps -o lstart=,command=` output

    Args:
        line: Five lstart fields followed by the full command line

    Returns:
        ProcessSnapshot with the arguments that follow the executable
    """
    fields = line.split(maxsplit=5)
    if len(fields) < 6:
        raise ProcessQueryError(f"Unexpected ps output: {line!r}")

    try:
        start_time = datetime.strptime(' '.join(fields[:5]), LSTART_FORMAT)
    except ValueError as e:
        raise ProcessQueryError(f"Unparsable process start time: {' '.join(fields[:5])!r}") from e

    command = fields[5].split(maxsplit=1)
    args = command[1] if len(command) > 1 else ''

    return ProcessSnapshot(running=True, start_time=start_time, invocation_args=args)


class PsProcessQuery(ProcessQuery):
    """Looks up a process by exact name with pgrep, then reads its details with ps"""

    def __init__(self, process_name: Optional[str] = None, timeout: Optional[float] = None):
        self.process_name = process_name or config.process_name
        self.timeout = timeout or config.process_query_timeout

    def _run(self, cmd: List[str]) -> subprocess.CompletedProcess:
        # C locale keeps lstart day and month names parseable
        env = dict(os.environ, LC_ALL='C')
        try:
            return subprocess.run(
                cmd,
                capture_output=True,
                text=True,
                timeout=self.timeout,
                env=env
            )
        except subprocess.TimeoutExpired as e:
            raise ProcessQueryError(f"{cmd[0]} timed out after {self.timeout}s") from e
        except (OSError, subprocess.SubprocessError) as e:
            raise ProcessQueryError(f"Could not run {cmd[0]}: {e}") from e

    def find_pid(self) -> Optional[int]:
        """Get the PID of the first matching process, or None if none is running"""
        result = self._run(['pgrep', '-x', self.process_name])

        # pgrep exits 1 when nothing matched
        if result.returncode == 1:
            return None
        if result.returncode != 0:
            raise ProcessQueryError(f"pgrep failed: {result.stderr.strip()}")

        pids = result.stdout.split()
        if not pids:
            return None

        try:
            return int(pids[0])
        except ValueError as e:
            raise ProcessQueryError(f"Unexpected pgrep output: {result.stdout!r}") from e

    def is_running(self) -> bool:
        return self.find_pid() is not None

    def query(self) -> Optional[ProcessSnapshot]:
        pid = self.find_pid()
        if pid is None:
            return None

        result = self._run(['ps', '-o', 'lstart=,command=', '-p', str(pid)])
        output = result.stdout.strip()

        # Process exited between pgrep and ps
        if result.returncode != 0 or not output:
            return None

        return parse_ps_line(output.splitlines()[0])
