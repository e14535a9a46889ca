"""Mode bit constants (as defined in `stat.h`)"""

# File types for mode field
S_IFMT = 0o170000  # File type mask
S_IFIFO = 0o010000  # Named pipe (fifo)
S_IFCHR = 0o020000  # Character special
S_IFDIR = 0o040000  # Directory
S_IFBLK = 0o060000  # Block special
S_IFREG = 0o100000  # Regular file
S_IFLNK = 0o120000  # Symbolic link
S_IFSOCK = 0o140000  # Socket
S_IFWHT = 0o160000  # Whiteout

# Special bits
S_ISUID = 0o4000  # Set user id on execution
S_ISGID = 0o2000  # Set group id on execution
S_ISVTX = 0o1000  # Sticky: save swapped text even after use

# Owner permissions
S_IRUSR = 0o400
S_IWUSR = 0o200
S_IXUSR = 0o100

# Group permissions
S_IRGRP = 0o040
S_IWGRP = 0o020
S_IXGRP = 0o010

# Others permissions
S_IROTH = 0o004
S_IWOTH = 0o002
S_IXOTH = 0o001

# Special bits plus the three permission triads
PERMISSION_MASK = 0o7777

# Default permissions
DEFAULT_FILE_MODE = S_IFREG | 0o644  # Regular file, rw-r--r--
DEFAULT_DIR_MODE = S_IFDIR | 0o755  # Directory, rwxr-xr-x
