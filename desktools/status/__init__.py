"""Status-line components and the status-line generator."""