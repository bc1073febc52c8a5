# everything the pipeline can blow up with.
# graph building and brandes never raise on good input, so most of this is loader + lookups


class HappinessGraphError(Exception):
    pass


class LoadError(HappinessGraphError):
    """csv could not be turned into country records. always fatal."""

    def __init__(self, message, path=None, line=None, field=None):
        self.path = path
        self.line = line
        self.field = field

        where = []
        if path is not None:
            where.append(str(path))
        if line is not None:
            where.append(f"line {line}")

        if where:
            message = f"{', '.join(where)}: {message}"
        super().__init__(message)


class InvalidNodeError(HappinessGraphError):

    def __init__(self, node):
        self.node = node
        super().__init__(f"invalid node: {node!r} is not in the graph")


class PipelineError(HappinessGraphError):
    """wraps whatever went wrong with the name of the stage it went wrong in"""

    def __init__(self, stage, cause):
        self.stage = stage
        self.cause = cause
        super().__init__(f"{stage} stage failed: {cause}")
