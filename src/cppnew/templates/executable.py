"""Executable project template (the default)."""

BUILD_SH = """#!/usr/bin/env bash
set -e

BUILD_TYPE="${1:-Debug}"

cmake -S . -B build -DCMAKE_BUILD_TYPE="$BUILD_TYPE"
cmake --build build --config "$BUILD_TYPE"

if [ "$2" = "run" ]; then
    "{{build_dir}}/{{project_name}}"
fi
"""

CMAKE_LISTS = """cmake_minimum_required(VERSION {{cmake_min_version}})

project({{project_name}} LANGUAGES CXX)

set(CMAKE_CXX_STANDARD {{cpp_standard}})
set(CMAKE_CXX_STANDARD_REQUIRED ON)
set(CMAKE_CXX_EXTENSIONS OFF)
set(CMAKE_EXPORT_COMPILE_COMMANDS ON)

set(CMAKE_RUNTIME_OUTPUT_DIRECTORY ${CMAKE_SOURCE_DIR}/{{build_dir}})

file(GLOB_RECURSE SOURCES CONFIGURE_DEPENDS ${CMAKE_SOURCE_DIR}/src/*.cpp)

add_executable(${PROJECT_NAME} ${SOURCES})

target_include_directories(${PROJECT_NAME} PRIVATE ${CMAKE_SOURCE_DIR}/src)

if(WIN32)
    target_link_directories(${PROJECT_NAME} PRIVATE ${CMAKE_SOURCE_DIR}/external/lib/win)
else()
    target_link_directories(${PROJECT_NAME} PRIVATE ${CMAKE_SOURCE_DIR}/external/lib/linux)
endif()
"""

MAIN_CPP = """#include <iostream>

int main(int argc, char* argv[])
{
    std::cout << "Hello from {{project_name}}!" << std::endl;
    return 0;
}
"""

GITIGNORE = """# Build output
build/
{{build_dir}}/

# Tooling
compile_commands.json
.cache/
.vscode/
.idea/
"""
