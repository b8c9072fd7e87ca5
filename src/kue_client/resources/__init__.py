"""Resource objects for the Kue JSON API.

Each resource groups related API commands and sends every request
through :meth:`kue_client.Client.request`.
"""

from .jobs import JOB_STATES, PRIORITIES, Job

__all__ = ["JOB_STATES", "PRIORITIES", "Job"]
