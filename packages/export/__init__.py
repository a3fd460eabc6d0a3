from .io import write_results_csv, write_manifest, describe_state, timestamp_id

__all__ = ["write_results_csv", "write_manifest", "describe_state", "timestamp_id"]
