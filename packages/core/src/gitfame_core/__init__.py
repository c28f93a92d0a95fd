"""Attribution engine: blame parsing, aggregation and ranking of contributors."""
