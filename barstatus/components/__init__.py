"""Components that each read one piece of system information and return it as text."""