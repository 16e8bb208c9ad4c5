"""
The MODEL layer contains pure data structures and business logic.
It has NO knowledge of any renderer or plotting front end.
It deals with Coordinates, Shapes, Letters and Word Layout.
"""
