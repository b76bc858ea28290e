"""Layout use cases: measurement retries and the row-limit engine."""
