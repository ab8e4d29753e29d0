# src/file_for_ai/errors.py


class FileForAIError(Exception): ...
class UsageError(FileForAIError): ...
class OutputError(FileForAIError): ...
class TokenizerError(FileForAIError): ...
class IgnoreRulesError(FileForAIError): ...
class PatternError(FileForAIError): ...
class TraversalError(FileForAIError): ...
