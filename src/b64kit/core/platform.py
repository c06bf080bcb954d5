# SPDX-FileCopyrightText: 2022 b64kit developers
# SPDX-License-Identifier: Apache-2.0

"""Runtime files and folders."""


# standard libs
import os
import stat

# external libs
from cmdkit.config import Namespace

# public interface
__all__ = ['cwd', 'home', 'root', 'path', 'default_path', 'file_permissions', 'check_private']


cwd = os.getcwd()
home = os.getenv('HOME')
root = os.getuid() == 0
path = Namespace({
    'system': {
        'log': '/var/log/b64kit',
        'config': '/etc/b64kit.toml'},
    'user': {
        'log': f'{home}/.b64kit/log',
        'config': f'{home}/.b64kit/config.toml'},
    'local': {
        'log': f'{cwd}/.b64kit/log',
        'config': f'{cwd}/.b64kit/config.toml'},
})


# NOTE: directories are only created on demand (see `exceptions.write_traceback`)
default_path = path.system if root else path.user


def file_permissions(filepath: str) -> str:
    """File permissions mask as a string."""
    return stat.filemode(os.stat(filepath).st_mode)


def check_private(filepath: str) -> bool:
    """Check that `filepath` has '-rw-------' permissions."""
    return file_permissions(filepath) == '-rw-------'
