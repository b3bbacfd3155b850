"""Item matching, input-line editing and key handling for a dynamic menu."""