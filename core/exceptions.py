"""Custom exceptions for Cuaderno"""


class CuadernoError(Exception):
    """Base exception for all Cuaderno errors"""
    pass


class PipelineError(CuadernoError):
    """Error in pipeline execution"""
    def __init__(self, message: str, stage: int = None):
        super().__init__(message)
        self.stage = stage


class StageError(CuadernoError):
    """Error in a specific stage"""
    def __init__(self, stage: int, message: str):
        super().__init__(f"Stage {stage}: {message}")
        self.stage = stage
        self.message = message


class ValidationError(CuadernoError):
    """Data validation error"""
    def __init__(self, message: str, row: int = None, column: str = None):
        super().__init__(message)
        self.row = row
        self.column = column


class MissingRequiredField(ValidationError):
    """A required field is absent, null or empty"""
    def __init__(self, field_name: str, row: int = None):
        super().__init__(f"Missing required field: {field_name}", row=row, column=field_name)
        self.field_name = field_name


class EmptyImport(ValidationError):
    """Uploaded spreadsheet has no data rows"""
    def __init__(self, message: str = "The uploaded file is empty."):
        super().__init__(message)


class FormDefinitionError(ValidationError):
    """Form definition cannot be saved as given"""
    pass


class EntrySubmissionError(CuadernoError):
    """Manual row submission failed as a whole"""
    pass


class FileParseError(CuadernoError):
    """Error parsing file"""
    def __init__(self, message: str, file_path: str = None):
        super().__init__(message)
        self.file_path = file_path


class DatabaseError(CuadernoError):
    """Database operation error"""
    pass


class StoreWriteFailure(DatabaseError):
    """A single document write was rejected by the store"""
    def __init__(self, message: str, collection: str = None, row: int = None):
        super().__init__(message)
        self.collection = collection
        self.row = row


class DocumentNotFound(DatabaseError):
    """Requested document does not exist"""
    def __init__(self, collection: str, doc_id: str):
        super().__init__(f"No document {doc_id!r} in {collection}")
        self.collection = collection
        self.doc_id = doc_id
