"""
Base view class for Localization Manager panels
"""


class BaseView:
    """Base class for views"""

    def __init__(self, parent_frame, app):
        """
        Initialize the view

        Args:
            parent_frame: The parent frame the view is packed into
            app: Reference to the main application instance
        """
        self.parent_frame = parent_frame
        self.app = app
        self.container = None

    @property
    def controller(self):
        return self.app.controller

    def create(self):
        """Create the view UI - to be implemented by subclasses"""
        raise NotImplementedError("Subclasses must implement create()")

    def update(self):
        """Update the view with current state - to be implemented by subclasses"""
        pass

    def destroy(self):
        """Clean up the view"""
        if self.container:
            self.container.destroy()
