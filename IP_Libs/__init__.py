"""
IP_Libs - Open Image Processor Library Modules

This package contains the core of the Open Image Processor, organized into
specialized sub-packages:

- ImageEditingLib: Pixel buffers, filters, mosaic, generators and file codec
- HistoryLib: Undo/redo history of committed images
- ScriptLib: Script commands, keyword registry and interpreter
- ControllerLib: Editor controller, view contract and editor configuration
"""

__version__ = "0.1.0"
