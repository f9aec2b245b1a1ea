"""Identity management for GeoAlbum.

Users, GitHub sign-in orchestration and user persistence. Session tokens
and the OAuth client live in geoalbum_auth.
"""
