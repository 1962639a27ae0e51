class SummaryGenerationError(Exception):
    pass
