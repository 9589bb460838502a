"""multinotify — send one message through any number of notification channels."""
