"""
Service identification attached to every log record.
"""

import os
import socket
from functools import lru_cache


@lru_cache(maxsize=1)
def get_service_context() -> str:
    service_name = os.getenv('SERVICE_NAME', 'fleet-inventory')
    deploy_env = os.getenv('DEPLOY_ENV', 'local_dev')

    # Containers expose a short hostname, local runs fall back to the PID
    instance = os.getenv('HOSTNAME') or socket.gethostname() or str(os.getpid())
    return f'{service_name}@{deploy_env}:{instance[:12]}'
