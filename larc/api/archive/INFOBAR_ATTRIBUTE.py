# Marker attribute of the anchor that carries an artifact's original URL
INFOBAR_ATTRIBUTE = "data-larc-infobar"
