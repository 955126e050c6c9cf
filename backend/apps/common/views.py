from django.db import connections
from django.db.utils import OperationalError
from django.http import JsonResponse
from django.views.decorators.http import require_GET
import time
from .logger import get_logger

logger = get_logger(__name__).bind(component='common', layer='health')


def _db_now(alias='default'):
    """Ask the database for its clock; doubles as the connectivity probe."""
    with connections[alias].cursor() as cursor:
        cursor.execute('SELECT CURRENT_TIMESTAMP')
        row = cursor.fetchone()
    value = row[0] if row else None
    return value.isoformat() if hasattr(value, 'isoformat') else str(value)


@require_GET
def health(request):
    """Health probe: reports whether the database answers queries."""
    started = time.time()
    try:
        timestamp = _db_now()
    except OperationalError as e:
        logger.warning('Database health check encountered operational error', error=str(e))
        return JsonResponse(
            {'status': 'unhealthy', 'database': 'disconnected', 'error': str(e)},
            status=500,
        )
    except Exception as e:  # driver bugs, misconfiguration
        logger.error(
            'Database health check failed unexpectedly',
            error=str(e),
            exception=e.__class__.__name__,
        )
        return JsonResponse(
            {'status': 'unhealthy', 'database': 'disconnected', 'error': str(e)},
            status=500,
        )
    latency = round((time.time() - started) * 1000, 2)
    logger.debug('Database health check succeeded', latency_ms=latency)
    return JsonResponse({'status': 'healthy', 'database': 'connected', 'timestamp': timestamp})
