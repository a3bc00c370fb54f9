[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "teapotscene"
version = "0.1.0"
description = "Scene mathematics for a lit teapot room: transforms, camera, OBJ models, tangents and light uniforms"
requires-python = ">=3.10"
keywords = ["graphics", "3d", "camera", "obj", "lighting", "normal-mapping", "matrices"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
]
dependencies = [
    "numpy",
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["teapotscene"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
