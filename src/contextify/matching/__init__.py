from .path_matcher import PathMatcher, file_extension, should_exclude_directory, should_include_file

__all__ = ['PathMatcher', 'file_extension', 'should_exclude_directory', 'should_include_file']
