"""
Core orchestration modules: ER session, console front end and report output.
"""
from .er_session import ERSession
from .console import ConsoleFrontend
from .file_manager import FileManager
from .report_generator import ReportGenerator

__all__ = ['ERSession', 'ConsoleFrontend', 'FileManager', 'ReportGenerator']
