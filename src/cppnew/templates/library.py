"""Static library project template."""

BUILD_SH = """#!/usr/bin/env bash
set -e

BUILD_TYPE="${1:-Release}"

cmake -S . -B build -DCMAKE_BUILD_TYPE="$BUILD_TYPE"
cmake --build build --config "$BUILD_TYPE"
cmake --install build --prefix install --config "$BUILD_TYPE"

echo "lib{{project_name}} installed to ./install"
"""

CMAKE_LISTS = """cmake_minimum_required(VERSION {{cmake_min_version}})

project({{project_name}} LANGUAGES CXX)

set(CMAKE_CXX_STANDARD {{cpp_standard}})
set(CMAKE_CXX_STANDARD_REQUIRED ON)
set(CMAKE_CXX_EXTENSIONS OFF)
set(CMAKE_EXPORT_COMPILE_COMMANDS ON)

file(GLOB_RECURSE SOURCES CONFIGURE_DEPENDS ${CMAKE_SOURCE_DIR}/src/*.cpp)

add_library(${PROJECT_NAME} STATIC ${SOURCES})

target_include_directories(${PROJECT_NAME} PUBLIC
    $<BUILD_INTERFACE:${CMAKE_SOURCE_DIR}/src>
    $<INSTALL_INTERFACE:include>
)

if(WIN32)
    target_link_directories(${PROJECT_NAME} PUBLIC ${CMAKE_SOURCE_DIR}/external/lib/win)
else()
    target_link_directories(${PROJECT_NAME} PUBLIC ${CMAKE_SOURCE_DIR}/external/lib/linux)
endif()

install(TARGETS ${PROJECT_NAME} ARCHIVE DESTINATION lib)
install(DIRECTORY ${CMAKE_SOURCE_DIR}/src/ DESTINATION include FILES_MATCHING PATTERN "*.h" PATTERN "*.hpp")
"""

GITIGNORE = """# Build output
build/
install/

# Tooling
compile_commands.json
.cache/
.vscode/
.idea/
"""
