LIBRARY_NAME = "resty"
