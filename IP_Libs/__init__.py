"""
IP_Libs - Image Processor Library Modules

This package contains the core functionality for the Image Processor project,
organized into specialized sub-packages:

- ImageCoreLib: Colors, images, blend modes, kernels and the image codec
- TransformLib: Image transformations and the descriptor parser
- SessionLib: Session state and the text command loop
"""

__version__ = "0.1.0"
