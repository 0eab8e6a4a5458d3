"""Terminal rendering: styling and layout, themes, agenda and month views, event form, dialogs and jump mode."""