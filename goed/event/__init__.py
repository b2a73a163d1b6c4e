"""Key and mouse input state, event types and key bindings."""