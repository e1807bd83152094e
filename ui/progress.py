"""Progress tracking"""

from abc import ABC, abstractmethod

from core.models import ImportReport


class ProgressTracker(ABC):
    """Abstract import progress tracker; methods may be sync or async"""

    @abstractmethod
    def start_batch(self, batch_num: int, size: int):
        """A batch of rows is about to be submitted"""
        pass

    @abstractmethod
    def complete_batch(self, batch_num: int, succeeded: int, failed: int):
        """Every row of a batch has settled"""
        pass

    @abstractmethod
    def fail(self, message: str):
        """Import could not run"""
        pass

    @abstractmethod
    def complete(self, report: ImportReport):
        """Import finished"""
        pass


class NullProgress(ProgressTracker):
    """Tracker that reports nothing"""

    def start_batch(self, batch_num: int, size: int):
        pass

    def complete_batch(self, batch_num: int, succeeded: int, failed: int):
        pass

    def fail(self, message: str):
        pass

    def complete(self, report: ImportReport):
        pass


class ConsoleProgress(ProgressTracker):
    """Console-based progress tracker"""

    def __init__(self):
        self.completed = set()
        self.current = None

    def start_batch(self, batch_num: int, size: int):
        self.current = batch_num
        print(f"[◉] Batch {batch_num}: {size} rows...")

    def complete_batch(self, batch_num: int, succeeded: int, failed: int):
        self.completed.add(batch_num)
        self.current = None
        print(f"[✓] Batch {batch_num}: {succeeded} saved, {failed} rejected")

    def fail(self, message: str):
        print(f"[✗] Import failed - {message}")

    def complete(self, report: ImportReport):
        print(f"\n[✓] Upload complete. Success: {report.success_count}, Errors: {report.error_count}")
