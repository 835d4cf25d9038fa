"""Version comparison and executable lookup helpers"""
