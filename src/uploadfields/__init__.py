#!/usr/bin/env python3
"""
UploadFields: administrator-defined metadata fields for file uploads,
serialized into a {{FileInfo}} template block on the file page.
"""

__version__ = "0.1.0"
