"""Pure calculations behind goal projections."""
