"""Job commands of the Kue JSON API."""

from typing import TYPE_CHECKING, Any
from urllib.parse import quote

if TYPE_CHECKING:
    from ..client import Client

JOB_STATES = ("inactive", "active", "complete", "failed", "delayed")

ORDERS = ("asc", "desc")

# Named priorities understood by Kue, lower values run first.
PRIORITIES = {
    "low": 10,
    "normal": 0,
    "medium": -5,
    "high": -10,
    "critical": -15,
}


def _segment(value: int | str) -> str:
    """Percent-encode a value for use as a single path segment."""
    return quote(str(value), safe="")


def _check_state(state: str) -> None:
    if state not in JOB_STATES:
        msg = f"Unknown job state: {state!r} (expected one of {', '.join(JOB_STATES)})"
        raise ValueError(msg)


class Job:
    """Commands related to Kue jobs.

    Obtain through :meth:`kue_client.Client.jobs` rather than creating
    directly. Every method returns whatever :meth:`Client.request` returns:
    the decoded response, or NO_RESULT on failure unless the client raises.
    """

    def __init__(self, client: "Client"):
        self._client = client

    def search(self, query: str) -> Any:
        """Search job ids by a full-text query."""
        return self._client.request("GET", "job/search", {"params": {"q": query}})

    def get(self, job_id: int | str) -> Any:
        """Get a job by id."""
        return self._client.request("GET", f"job/{_segment(job_id)}")

    def log(self, job_id: int | str) -> Any:
        """Get the log lines of a job."""
        return self._client.request("GET", f"job/{_segment(job_id)}/log")

    def list(
        self,
        start: int = 0,
        end: int = -1,
        order: str = "asc",
        state: str | None = None,
        job_type: str | None = None,
    ) -> Any:
        """List jobs in the range [start, end], optionally filtered.

        Args:
            start: Index of the first job.
            end: Index of the last job; -1 means the end of the list.
            order: Sort order, "asc" or "desc".
            state: Only list jobs in this state.
            job_type: Only list jobs of this type. Requires state.

        Raises:
            ValueError: If order or state is invalid, or job_type is given
                without state.
        """
        if order not in ORDERS:
            msg = f"Unknown order: {order!r} (expected asc or desc)"
            raise ValueError(msg)

        segments = []
        if job_type is not None:
            if state is None:
                msg = "Listing jobs by type requires a state"
                raise ValueError(msg)
            segments.append(_segment(job_type))
        if state is not None:
            _check_state(state)
            segments.append(state)
        segments.extend([f"{start}..{end}", order])

        return self._client.request("GET", "jobs/" + "/".join(segments))

    def types(self) -> Any:
        """List the known job types."""
        return self._client.request("GET", "job/types")

    def count(self, job_type: str, state: str) -> Any:
        """Count jobs of a type in the given state."""
        _check_state(state)
        return self._client.request("GET", f"jobs/{_segment(job_type)}/{state}/stats")

    def inactive(self, job_type: str) -> Any:
        """List ids of inactive jobs of a type."""
        return self._client.request("GET", f"inactive/{_segment(job_type)}")

    def create(
        self,
        job_type: str,
        data: dict[str, Any] | None = None,
        options: dict[str, Any] | None = None,
    ) -> Any:
        """Create a job.

        Args:
            job_type: Job type to enqueue.
            data: Job payload.
            options: Kue job options (priority, attempts, delay, ...).
        """
        payload = {"type": job_type, "data": data or {}, "options": options or {}}
        return self._client.request("POST", "job", {"json": payload})

    def update_state(self, job_id: int | str, state: str) -> Any:
        """Move a job to another state."""
        _check_state(state)
        return self._client.request("PUT", f"job/{_segment(job_id)}/state/{state}")

    def update_priority(self, job_id: int | str, priority: int | str) -> Any:
        """Change the priority of a job.

        Args:
            job_id: Job id.
            priority: Numeric priority or one of the names in PRIORITIES.

        Raises:
            ValueError: If priority is neither an int nor a known name.
        """
        if isinstance(priority, bool) or not isinstance(priority, int | str):
            msg = f"Invalid priority: {priority!r}"
            raise ValueError(msg)
        if isinstance(priority, str) and priority not in PRIORITIES:
            msg = f"Unknown priority: {priority!r} (expected one of {', '.join(PRIORITIES)})"
            raise ValueError(msg)
        # The API only parses numeric priorities.
        value = PRIORITIES.get(priority, priority)
        return self._client.request("PUT", f"job/{_segment(job_id)}/priority/{value}")

    def remove(self, job_id: int | str) -> Any:
        """Delete a job."""
        return self._client.request("DELETE", f"job/{_segment(job_id)}")
