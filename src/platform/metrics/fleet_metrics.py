from prometheus_client import Counter, Histogram


class FleetMetrics:
    """
    Fleet Inventory Metrics Collector

    Tracks seat reconciliation volume and latency plus routing write operations
    """

    def __init__(self):
        # ========== Seat Diagram Metrics ==========
        self.seat_reconciliations = Counter(
            'seat_configuration_reconciliations_total',
            'Seat configuration reconciliations',
            ['result'],  # result: success/error
        )

        self.seat_reconciliation_duration = Histogram(
            'seat_configuration_reconciliation_duration_seconds',
            'Seat configuration reconciliation duration',
            buckets=[0.01, 0.05, 0.1, 0.2, 0.5, 1.0, 2.0, 5.0],
        )

        self.seat_operations = Counter(
            'seat_configuration_seat_operations_total',
            'Seat rows written by reconciliation',
            ['operation'],  # operation: created/updated/deactivated
        )

        # ========== Routing Metrics ==========
        self.pathway_option_syncs = Counter(
            'pathway_option_syncs_total',
            'Bulk pathway option synchronizations',
            ['result'],
        )

    # ========== Helper Methods ==========

    def record_seat_reconciliation(
        self, *, created: int, updated: int, deactivated: int, duration: float
    ):
        self.seat_reconciliations.labels(result='success').inc()
        self.seat_reconciliation_duration.observe(duration)
        self.seat_operations.labels(operation='created').inc(created)
        self.seat_operations.labels(operation='updated').inc(updated)
        self.seat_operations.labels(operation='deactivated').inc(deactivated)

    def record_seat_reconciliation_error(self):
        self.seat_reconciliations.labels(result='error').inc()

    def record_pathway_option_sync(self, *, result: str):
        self.pathway_option_syncs.labels(result=result).inc()


# Global metrics instance
metrics = FleetMetrics()
