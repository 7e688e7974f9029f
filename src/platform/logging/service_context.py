"""
Service context for log lines.

Identifies which process of which deployment emitted a log line, e.g.
``seat-booking@local_dev:41235``.
"""

from functools import lru_cache
import os


@lru_cache(maxsize=1)
def get_service_context() -> str:
    service_name = os.getenv('SERVICE_NAME', 'seat-booking')
    deploy_env = os.getenv('DEPLOY_ENV', 'local_dev')
    instance_id = os.getenv('HOSTNAME') or str(os.getpid())
    return f'{service_name}@{deploy_env}:{instance_id}'
