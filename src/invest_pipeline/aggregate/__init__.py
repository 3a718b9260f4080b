"""Gold-layer aggregation helpers.

This package contains routines that turn the Clean layer into analytical
Gold datasets (totals and means by industry and state, the monthly time
series, period buckets, a missing-data report) plus the record-level
grouping functions they agree with. Gold tables are small enough to compute
eagerly and hand straight to the rendering layer.
"""
